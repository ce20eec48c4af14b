from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


def require_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Corpo da requisição deve ser um objeto JSON")
    return data


def pick(data: Mapping[str, Any], *names: str) -> Optional[str]:
    """First non-empty value among alternative field names (snake_case / camelCase)."""
    for name in names:
        value = data.get(name)
        if value not in (None, ""):
            return str(value)
    return None
