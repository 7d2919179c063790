from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str, *, code: str = "validation_error") -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty", code=code)
    return value.strip()


def require_non_negative(value: float, field_name: str, *, code: str = "validation_error") -> float:
    if value is None or not math.isfinite(value) or value < 0:
        raise ValidationError(f"{field_name} must not be negative", code=code, params={"value": value})
    return float(value) + 0.0
