from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import ShiftTally
from ..common.datetime_utils import in_month
from ..common.validators import require_month
from ..expenses.model import ExpenseRecord
from ..expenses.repository import ExpenseRepository
from ..guards.repository import GuardRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import SalaryReport, SalarySlip, SalaryTotals


class PayrollService:
    """Monthly salary statement for every guard in the store.

    Read-only: nothing stored is touched, so the same store state and month
    always give the same report.
    """

    def __init__(
        self,
        guards: GuardRepository,
        aggregator: AttendanceAggregator,
        expenses: ExpenseRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        include_inactive: bool = True,
    ):
        self._guards = guards
        self._aggregator = aggregator
        self._expenses = expenses
        self._calculator = calculator or StandardPayrollCalculator()
        self._include_inactive = include_inactive

    def compute_salary_slips(self, month: str) -> List[SalarySlip]:
        month = require_month(month)
        tallies = self._aggregator.tally_by_guard(month)

        expenses: Dict[str, List[ExpenseRecord]] = defaultdict(list)
        for e in self._expenses.get_all():
            if in_month(e.date, month):
                expenses[e.guard_id].append(e)

        slips = []
        for guard in self._guards.get_all():
            if not guard.is_active and not self._include_inactive:
                continue
            slips.append(
                self._calculator.salary_slip(
                    guard=guard,
                    month=month,
                    tally=tallies.get(guard.id, ShiftTally()),
                    expenses=expenses.get(guard.id, []),
                )
            )
        return slips

    @staticmethod
    def column_totals(slips: Sequence[SalarySlip]) -> SalaryTotals:
        return SalaryTotals.from_slips(slips)

    def salary_report(self, month: str) -> SalaryReport:
        slips = self.compute_salary_slips(month)
        return SalaryReport(month=month, slips=slips, totals=self.column_totals(slips))
