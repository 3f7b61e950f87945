from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def in_month(iso_date: str, month: str) -> bool:
    """True when a YYYY-MM-DD string falls inside a YYYY-MM month."""
    return iso_date.startswith(month)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_iso() -> str:
    return now_local().date().isoformat()
