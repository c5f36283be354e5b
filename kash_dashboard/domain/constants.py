"""Domain constants for the overview aggregates."""

OVERVIEW_MONTH_LABELS = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun")

SHORT_MONTH_NAMES = {
    "pt_BR": (
        "Jan",
        "Fev",
        "Mar",
        "Abr",
        "Mai",
        "Jun",
        "Jul",
        "Ago",
        "Set",
        "Out",
        "Nov",
        "Dez",
    ),
    "en_US": (
        "Jan",
        "Feb",
        "Mar",
        "Apr",
        "May",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Oct",
        "Nov",
        "Dec",
    ),
}

DEFAULT_MONTH_LOCALE = "pt_BR"

RECENT_TRANSACTIONS_LIMIT = 5


__all__ = [
    "OVERVIEW_MONTH_LABELS",
    "SHORT_MONTH_NAMES",
    "DEFAULT_MONTH_LOCALE",
    "RECENT_TRANSACTIONS_LIMIT",
]
