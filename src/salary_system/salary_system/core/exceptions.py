from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations.

    ``code`` names the message template used to render the error for the user,
    ``params`` fills it in.
    """

    code = "domain_error"

    def __init__(self, message: str, *, code: Optional[str] = None, params: Optional[dict[str, Any]] = None):
        super().__init__(message)
        if code:
            self.code = code
        self.params = dict(params or {})


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class BonusRangeError(ValidationError):
    """Raised when a bonus percentage falls outside the allowed range."""

    code = "bonus_out_of_range"

    def __init__(self, percentage: float, minimum: float, maximum: float):
        super().__init__(
            f"bonus percentage must be between {minimum:g}% and {maximum:g}%",
            params={"percentage": percentage, "minimum": minimum, "maximum": maximum},
        )
        self.percentage = percentage


class SalaryCeilingError(ValidationError):
    """Raised when the computed final salary exceeds the ceiling."""

    code = "salary_over_ceiling"

    def __init__(self, final_salary: float, ceiling: float):
        super().__init__(
            "final salary exceeds maximum allowed amount",
            params={"final_salary": final_salary, "ceiling": ceiling},
        )
        self.final_salary = final_salary
        self.ceiling = ceiling


class EmptyCollectionError(DomainError):
    """Raised when an aggregate is requested over no work entries."""

    code = "no_works"
