"""Hierarchical category totals."""

from collections.abc import Iterable
from decimal import Decimal

from church_ledger.domain.models import (
    CategoryAmountRow,
    CategoryBreakdownItem,
    SubcategoryTotal,
)


def compute_category_breakdown(
    rows: Iterable[CategoryAmountRow],
) -> list[CategoryBreakdownItem]:
    """Group category sums under their parent category.

    A category without a parent acts as its own group and also appears as a
    subcategory bucket of that group when it carries movements directly.

    Args:
        rows: Sums per category for a fixed year, kind and currency.

    Returns:
        list[CategoryBreakdownItem]: Groups sorted by total descending, each
        with subcategories sorted by total descending.
    """
    group_names: dict[str, str] = {}
    group_totals: dict[str, Decimal] = {}
    sub_names: dict[str, dict[str, str]] = {}
    sub_totals: dict[str, dict[str, Decimal]] = {}

    for row in rows:
        parent_id = row.parent_id or row.category_id
        parent_name = row.parent_name or row.category_name
        if parent_id not in group_totals:
            group_names[parent_id] = parent_name
            group_totals[parent_id] = Decimal("0")
            sub_names[parent_id] = {}
            sub_totals[parent_id] = {}
        group_totals[parent_id] += row.amount
        subs = sub_totals[parent_id]
        sub_names[parent_id].setdefault(row.category_id, row.category_name)
        subs[row.category_id] = (
            subs.get(row.category_id, Decimal("0")) + row.amount
        )

    items = []
    for parent_id, total in group_totals.items():
        subcategories = [
            SubcategoryTotal(
                id=sub_id,
                name=sub_names[parent_id][sub_id],
                total=sub_total,
            )
            for sub_id, sub_total in sub_totals[parent_id].items()
        ]
        subcategories.sort(key=lambda item: (-item.total, item.name))
        items.append(
            CategoryBreakdownItem(
                id=parent_id,
                name=group_names[parent_id],
                total=total,
                subcategories=subcategories,
            )
        )
    items.sort(key=lambda item: (-item.total, item.name))
    return items


__all__ = ["compute_category_breakdown"]
