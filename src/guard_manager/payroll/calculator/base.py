from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import ShiftTally
from ...expenses.model import ExpenseRecord
from ...guards.model import Guard
from ..model import SalarySlip


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def salary_slip(
        self,
        *,
        guard: Guard,
        month: str,
        tally: ShiftTally,
        expenses: Sequence[ExpenseRecord],
    ) -> SalarySlip:
        """Build one guard's slip from the month's tally and expenses.

        ``expenses`` is already filtered to the guard and month.
        """
        raise NotImplementedError
