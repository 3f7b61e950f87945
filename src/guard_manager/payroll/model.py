from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence

from ..core.enums import ExpenseType


@dataclass(frozen=True)
class SalarySlip:
    """Derived monthly salary statement for one guard. Never persisted."""

    guard_id: str
    guard_name: str
    month: str
    total_shifts: int = 0
    gross_salary: float = 0
    total_advance: float = 0
    total_food_cost: float = 0
    uniform_deduction: float = 0
    net_salary: float = 0
    expenses_by_type: Dict[ExpenseType, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "guard_id": self.guard_id,
            "guard_name": self.guard_name,
            "month": self.month,
            "total_shifts": self.total_shifts,
            "gross_salary": self.gross_salary,
            "total_advance": self.total_advance,
            "total_food_cost": self.total_food_cost,
            "uniform_deduction": self.uniform_deduction,
            "net_salary": self.net_salary,
            "expenses_by_type": {t.value: v for t, v in self.expenses_by_type.items()},
        }


@dataclass(frozen=True)
class SalaryTotals:
    """Column sums across every slip of a report."""

    total_shifts: int = 0
    gross_salary: float = 0
    total_advance: float = 0
    total_food_cost: float = 0
    uniform_deduction: float = 0
    net_salary: float = 0

    @classmethod
    def from_slips(cls, slips: Sequence[SalarySlip]) -> "SalaryTotals":
        return cls(
            total_shifts=sum(s.total_shifts for s in slips),
            gross_salary=sum(s.gross_salary for s in slips),
            total_advance=sum(s.total_advance for s in slips),
            total_food_cost=sum(s.total_food_cost for s in slips),
            uniform_deduction=sum(s.uniform_deduction for s in slips),
            net_salary=sum(s.net_salary for s in slips),
        )

    def to_dict(self) -> dict:
        return {
            "total_shifts": self.total_shifts,
            "gross_salary": self.gross_salary,
            "total_advance": self.total_advance,
            "total_food_cost": self.total_food_cost,
            "uniform_deduction": self.uniform_deduction,
            "net_salary": self.net_salary,
        }


@dataclass(frozen=True)
class SalaryReport:
    month: str
    slips: list[SalarySlip]
    totals: SalaryTotals
