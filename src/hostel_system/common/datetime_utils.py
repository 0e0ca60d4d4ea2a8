from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    """Empty or missing values mean "no bound"."""
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def format_locale_date(value: date) -> str:
    """US locale short date, e.g. 8/1/2024."""
    return f"{value.month}/{value.day}/{value.year}"
