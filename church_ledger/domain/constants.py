"""Domain constants for church finance reporting."""

DEFAULT_CURRENCY = "ARS"

DEFAULT_TIMEZONE = "America/Argentina/Buenos_Aires"

PRIMARY_CURRENCIES = ("ARS", "USD")

TRAILING_MONTHS = 12

TOP_CATEGORIES_LIMIT = 10

RECENT_MOVEMENTS_LIMIT = 5

EXCHANGE_CATEGORY_NAME = "Cambio de Moneda"

MONTH_ABBREVIATIONS_ES = (
    "ene",
    "feb",
    "mar",
    "abr",
    "may",
    "jun",
    "jul",
    "ago",
    "sept",
    "oct",
    "nov",
    "dic",
)


__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_TIMEZONE",
    "PRIMARY_CURRENCIES",
    "TRAILING_MONTHS",
    "TOP_CATEGORIES_LIMIT",
    "RECENT_MOVEMENTS_LIMIT",
    "EXCHANGE_CATEGORY_NAME",
    "MONTH_ABBREVIATIONS_ES",
]
