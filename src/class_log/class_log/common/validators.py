from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DATE_PATTERN
from ..core.exceptions import ValidationError
from .datetime_utils import parse_calendar_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return str(value).strip()


def require_calendar_date(value: Optional[str], field_name: str = "data") -> str:
    value = require_non_empty(value, field_name)
    if not re.match(DATE_PATTERN, value):
        raise ValidationError(f"{field_name} deve estar no formato DD/MM/YYYY")
    try:
        parse_calendar_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} não é uma data válida: {value}") from None
    return value
