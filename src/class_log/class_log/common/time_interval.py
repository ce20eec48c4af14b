"""Wall-clock interval arithmetic for class sessions.

Sessions never span midnight, so both points of an interval are taken on a
shared reference day and an end before the start is rejected.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..core.enums import DurationStyle
from ..core.exceptions import NegativeIntervalError, TimeParseError

_TIME_RE = re.compile(r"^([0-9]{2}):([0-9]{2})(?::([0-9]{2}))?$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    hour: int
    minute: int
    second: int = 0

    @property
    def seconds_since_midnight(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def __str__(self) -> str:
        if self.second:
            return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return f"{self.hour:02d}:{self.minute:02d}"


TimeLike = Union[TimeOfDay, str]


def parse_time(text: str) -> TimeOfDay:
    """Parse a zero-padded 24-hour ``HH:MM`` or ``HH:MM:SS`` string."""
    if text is None:
        raise TimeParseError("Horário não informado")

    match = _TIME_RE.match(str(text).strip())
    if not match:
        raise TimeParseError(f"Horário inválido: {text!r} (esperado HH:MM)")

    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3)) if match.group(3) else 0
    if hour > 23 or minute > 59 or second > 59:
        raise TimeParseError(f"Horário fora do intervalo: {text!r}")
    return TimeOfDay(hour=hour, minute=minute, second=second)


def _coerce(value: TimeLike) -> TimeOfDay:
    return value if isinstance(value, TimeOfDay) else parse_time(value)


def elapsed(start: TimeLike, end: TimeLike) -> timedelta:
    """Duration between two wall-clock points of the same day."""
    start_t = _coerce(start)
    end_t = _coerce(end)

    diff = end_t.seconds_since_midnight - start_t.seconds_since_midnight
    if diff < 0:
        raise NegativeIntervalError(f"Horário de término ({end_t}) anterior ao início ({start_t})")
    return timedelta(seconds=diff)


def format_duration(duration: timedelta, style: DurationStyle = DurationStyle.VERBOSE) -> str:
    # Whole minutes only; leftover seconds are dropped.
    total_minutes = int(duration.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)

    if DurationStyle(style) == DurationStyle.COMPACT:
        return f"{hours}h {minutes}m"
    return f"{hours} Horas e {minutes} Minutos"


def format_decimal_hours(duration: timedelta) -> str:
    """Render a duration as decimal hours with two places (90 min -> "1.50")."""
    hours = Decimal(int(duration.total_seconds())) / Decimal(3600)
    return str(hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
