"""Readable rendering and export of audit trail entries."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, tzinfo
from decimal import InvalidOperation
import json
from typing import Any
from zoneinfo import ZoneInfo

from church_ledger.domain.constants import DEFAULT_TIMEZONE
from church_ledger.domain.models.audit import AuditLogEntry
from church_ledger.utils.decimal_utils import coerce_decimal, quantize_cents


FIELD_LABELS = {
    "type": "Tipo",
    "amount": "Monto",
    "currency": "Moneda",
    "categoryId": "Categoría (ID)",
    "categoryName": "Categoría",
    "description": "Descripción",
    "date": "Fecha",
    "name": "Nombre",
    "email": "Correo electrónico",
    "role": "Rol",
    "parentId": "Categoría padre",
    "firstName": "Nombre",
    "lastName": "Apellido",
    "phone": "Teléfono",
    "address": "Dirección",
    "membershipDate": "Fecha de membresía",
    "isActive": "Activo",
    "fromAmount": "Monto origen",
    "toAmount": "Monto destino",
    "fromCurrency": "Moneda origen",
    "toCurrency": "Moneda destino",
    "exchangeRate": "Tipo de cambio",
}

_AMOUNT_KEYS = {"amount", "fromAmount", "toAmount"}
_CURRENCY_KEYS = {"currency", "fromCurrency", "toCurrency"}
_TYPE_NAMES = {
    "INCOME": "Ingreso",
    "EXPENSE": "Egreso",
    "EXCHANGE": "Cambio de moneda",
}
_CURRENCY_NAMES = {"ARS": "Pesos argentinos", "USD": "Dólares"}

EXPORT_COLUMNS = (
    "Fecha/Hora",
    "Tipo de Evento",
    "Severidad",
    "Usuario",
    "Recurso",
    "ID Recurso",
    "Detalles",
    "IP",
    "User Agent",
)


def create_change_diff(
    previous: Mapping[str, Any],
    updated: Mapping[str, Any],
) -> dict[str, dict[str, Any]]:
    """Return the previous and new values of fields that changed.

    Only keys present in ``updated`` are compared.
    """
    diff: dict[str, dict[str, Any]] = {"previous": {}, "new": {}}
    for key, value in updated.items():
        if previous.get(key) != value:
            diff["previous"][key] = previous.get(key)
            diff["new"][key] = value
    return diff


def format_audit_details(
    details: Mapping[str, Any] | None,
    tz: tzinfo | None = None,
) -> str:
    """Render audit details as Spanish ``Label: value`` lines.

    Change diffs (``previous``/``new``) render as ``Label: old → new`` for
    the fields whose displayed value changed.

    Args:
        details: Raw details payload stored with the audit event.
        tz: Timezone used to display dates.

    Returns:
        str: Newline-separated description.
    """
    if not details:
        return "Sin detalles adicionales"
    zone = tz or ZoneInfo(DEFAULT_TIMEZONE)

    previous = details.get("previous")
    new = details.get("new")
    if (
        isinstance(previous, Mapping)
        and isinstance(new, Mapping)
        and previous
        and new
    ):
        has_category_name = bool(
            previous.get("categoryName") or new.get("categoryName")
        )
        changes = []
        for key in dict.fromkeys([*previous, *new]):
            if key == "categoryId" and has_category_name:
                continue
            old_value = format_detail_value(key, previous.get(key), zone)
            new_value = format_detail_value(key, new.get(key), zone)
            if old_value != new_value:
                changes.append(
                    f"{FIELD_LABELS.get(key, key)}: {old_value} → {new_value}"
                )
        return "\n".join(changes) if changes else "Sin cambios detectados"

    lines = []
    for key, value in details.items():
        if key == "categoryId" and details.get("categoryName"):
            continue
        lines.append(
            f"{FIELD_LABELS.get(key, key)}: "
            f"{format_detail_value(key, value, zone)}"
        )
    return "\n".join(lines)


def format_detail_value(key: str, value: Any, tz: tzinfo) -> str:
    """Format a single detail value according to its field."""
    if value is None:
        return "N/A"
    if key in _AMOUNT_KEYS:
        return format_amount_es_ar(value)
    if key == "type":
        return _TYPE_NAMES.get(value, str(value))
    if key in _CURRENCY_KEYS:
        return _CURRENCY_NAMES.get(value, str(value))
    if isinstance(value, bool):
        return "Sí" if value else "No"
    if "Date" in key or key == "date":
        return _format_date(value, tz)
    if key == "exchangeRate":
        try:
            return f"{quantize_cents(coerce_decimal(value))}"
        except InvalidOperation:
            return str(value)
    return str(value)


def format_amount_es_ar(value: Any) -> str:
    """Format an amount as Argentine pesos, e.g. ``$ 1.234,5``."""
    try:
        amount = quantize_cents(coerce_decimal(value))
    except InvalidOperation:
        return str(value)
    if not amount.is_finite():
        return str(value)
    integer, _, fraction = f"{abs(amount):.2f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    text = f"$ {grouped},{fraction}" if fraction else f"$ {grouped}"
    return f"-{text}" if amount < 0 else text


def format_datetime_es_ar(value: datetime, tz: tzinfo | None = None) -> str:
    """Format a timestamp as ``dd/mm/yyyy, HH:MM`` in the given timezone."""
    zone = tz or ZoneInfo(DEFAULT_TIMEZONE)
    local = value.astimezone(zone) if value.tzinfo else value
    return local.strftime("%d/%m/%Y, %H:%M")


def build_audit_export_rows(
    entries: Iterable[AuditLogEntry],
    tz: tzinfo | None = None,
) -> list[dict[str, str]]:
    """Return one export row per audit entry keyed by Spanish headers."""
    rows = []
    for entry in entries:
        values = (
            format_datetime_es_ar(entry.created_at, tz),
            entry.event_type,
            entry.severity.value,
            entry.user_email,
            entry.resource_type or "-",
            entry.resource_id or "-",
            json.dumps(entry.details, default=str, ensure_ascii=False),
            entry.ip_address or "unknown",
            entry.user_agent or "unknown",
        )
        rows.append(dict(zip(EXPORT_COLUMNS, values)))
    return rows


def _format_date(value: Any, tz: tzinfo) -> str:
    parsed = value
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(parsed, datetime):
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(tz)
        return parsed.strftime("%d/%m/%Y")
    if isinstance(parsed, date):
        return parsed.strftime("%d/%m/%Y")
    return str(value)


__all__ = [
    "FIELD_LABELS",
    "EXPORT_COLUMNS",
    "create_change_diff",
    "format_audit_details",
    "format_detail_value",
    "format_amount_es_ar",
    "format_datetime_es_ar",
    "build_audit_export_rows",
]
