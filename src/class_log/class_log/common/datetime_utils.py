from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT


def parse_calendar_date(value: str) -> date:
    """Parse DD/MM/YYYY string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_calendar_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)
