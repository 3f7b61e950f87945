from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value, field_name: str) -> float:
    number = _as_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive(value, field_name: str) -> float:
    number = _as_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def require_iso_date(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None
    return value


def require_month(value: Optional[str], field_name: str = "Month") -> str:
    value = require_non_empty(value, field_name)
    try:
        datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM month") from None
    return value


def _as_number(value, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    # Keep whole numbers as int so stored records stay tidy.
    return int(number) if number.is_integer() else number
