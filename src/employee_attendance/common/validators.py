from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_positive_int(value: Any, field_name: str, message: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(message, field=field_name) from None
    if number <= 0:
        raise ValidationError(message, field=field_name)
    return number


def optional_text(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    """Strip text input; blank becomes None. Longer than `max_len` is rejected."""
    if value is None or not value.strip():
        return None
    value = value.strip()
    if len(value) > max_len:
        raise ValidationError(f"{field_name.capitalize()} must be at most {max_len} characters", field=field_name)
    return value


def require_month(year: Any, month: Any) -> tuple[int, int]:
    try:
        y, m = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError("Invalid month or year", field="month") from None
    if not 1 <= m <= 12 or not 1 <= y <= 9999:
        raise ValidationError("Invalid month or year", field="month")
    return y, m


def optional_int(value: Any) -> Optional[int]:
    """Query-string int; blank or malformed gives None."""
    if value is None or not str(value).strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None
