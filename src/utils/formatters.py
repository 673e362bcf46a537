"""Display formatting for prices, dates and sizes."""

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union


def _to_datetime(value: Union[date, datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_price(price: Union[int, float, str, Decimal]) -> str:
    """Whole-dollar USD string, e.g. `$1,250,000`."""
    amount = Decimal(str(price).strip()).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,}"


def format_date(value: Union[date, datetime, str]) -> str:
    """e.g. `January 5, 2024`."""
    dt = _to_datetime(value)
    return f"{dt:%B} {dt.day}, {dt.year}"


def format_datetime(value: Union[datetime, str]) -> str:
    """e.g. `January 5, 2024 at 02:30 PM`."""
    dt = _to_datetime(value)
    return f"{format_date(dt)} at {dt:%I:%M %p}"


def format_days_ago(days: int) -> str:
    if days == 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def format_square_feet(square_feet: int) -> str:
    return f"{square_feet:,} sq ft"


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
