"""Currency and date helpers for the pt-BR / BRL locale.

Timestamps are epoch milliseconds interpreted in the local timezone.
"""

from datetime import datetime

WEEKDAY_NAMES_PT = [
    "segunda-feira",
    "terça-feira",
    "quarta-feira",
    "quinta-feira",
    "sexta-feira",
    "sábado",
    "domingo",
]

# datetime.weekday(): Friday=4, Saturday=5, Sunday=6
WEEKEND_DAYS = {4, 5, 6}


def format_currency(value: float) -> str:
    """Format a value as Brazilian Real, e.g. `R$ 1.234,56`."""
    sign = "-" if round(value, 2) < 0 else ""
    # Swap the en-US separators for pt-BR ones
    digits = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {digits}"


def to_epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def from_epoch_ms(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp / 1000)


def is_today(timestamp: int, now: datetime) -> bool:
    """True if the timestamp falls on the same local calendar day as `now`."""
    return from_epoch_ms(timestamp).date() == now.date()


def is_weekend(timestamp: int) -> bool:
    """True for Friday, Saturday and Sunday (the stall's trading weekend)."""
    return from_epoch_ms(timestamp).weekday() in WEEKEND_DAYS


def get_day_name(timestamp: int) -> str:
    return WEEKDAY_NAMES_PT[from_epoch_ms(timestamp).weekday()]


def format_date(timestamp: int) -> str:
    return from_epoch_ms(timestamp).strftime("%d/%m/%Y")


def format_time(timestamp: int) -> str:
    return from_epoch_ms(timestamp).strftime("%H:%M")
