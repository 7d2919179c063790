from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import MAX_SALARY
from ..core.exceptions import SalaryCeilingError, ValidationError
from ..salary.strategies.base import SalaryStrategy
from ..salary.strategies.basic_strategy import BasicSalaryStrategy
from ..salary.strategies.bonus_strategy import BonusSalaryStrategy


@dataclass(frozen=True)
class WorkEntry:
    """Domain entity: one registered work type.

    The final salary is calculated and checked against the ceiling once, at
    construction. An instance therefore never exists in an invalid state.
    """

    name: str
    base_amount: float
    strategy: SalaryStrategy
    final_salary: float = field(init=False)

    def __post_init__(self) -> None:
        name = require_non_empty(self.name, "name", code="empty_name")
        base_amount = require_non_negative(self.base_amount, "base amount", code="negative_base_amount")

        final_salary = self.strategy.calculate(base_amount)
        if final_salary > MAX_SALARY:
            raise SalaryCeilingError(final_salary, MAX_SALARY)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "base_amount", base_amount)
        object.__setattr__(self, "final_salary", final_salary)

    @classmethod
    def simple(cls, name: str, base_amount: float) -> "WorkEntry":
        return cls(name=name, base_amount=base_amount, strategy=BasicSalaryStrategy())

    @classmethod
    def with_bonus(cls, name: str, base_amount: float, bonus_percentage: float) -> "WorkEntry":
        return cls(name=name, base_amount=base_amount, strategy=BonusSalaryStrategy(bonus_percentage))

    def get_salary(self) -> float:
        return self.final_salary

    def describe(self) -> str:
        return f"{self.name}: {self.final_salary:.2f} (base: {self.base_amount:.2f}, strategy: {self.strategy.label})"


@dataclass(frozen=True)
class WorkCreation:
    """Outcome of :func:`build_work_entry`: exactly one of ``entry`` / ``error`` is set."""

    entry: Optional[WorkEntry] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


def build_work_entry(name: str, base_amount: float, strategy: SalaryStrategy) -> WorkCreation:
    try:
        return WorkCreation(entry=WorkEntry(name=name, base_amount=base_amount, strategy=strategy))
    except ValidationError as exc:
        return WorkCreation(error=exc)
