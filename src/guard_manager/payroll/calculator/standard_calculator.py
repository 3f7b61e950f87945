from __future__ import annotations

from typing import Dict, Sequence

from ...attendance.model import ShiftTally
from ...core.enums import AdvanceScope, ExpenseType
from ...expenses.model import ExpenseRecord
from ...guards.model import Guard
from ..model import SalarySlip
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: shifts x rate, less advances, meals and uniform. Net may go negative.

    With ``AdvanceScope.ALL`` every expense type (Advance, Fine, Other) counts
    as advance; ``ADVANCE_ONLY`` keeps fines and other entries out of it.
    """

    def __init__(self, advance_scope: AdvanceScope = AdvanceScope.ALL):
        self._scope = advance_scope

    def salary_slip(
        self,
        *,
        guard: Guard,
        month: str,
        tally: ShiftTally,
        expenses: Sequence[ExpenseRecord],
    ) -> SalarySlip:
        by_type: Dict[ExpenseType, float] = {t: 0 for t in ExpenseType}
        for e in expenses:
            by_type[e.type] += e.amount

        if self._scope == AdvanceScope.ADVANCE_ONLY:
            total_advance = by_type[ExpenseType.ADVANCE]
        else:
            total_advance = sum(by_type.values())

        gross = tally.present_shifts * guard.salary_per_shift
        food = tally.food_taken * guard.food_cost_per_shift
        net = gross - total_advance - food - guard.uniform_deduction

        return SalarySlip(
            guard_id=guard.id,
            guard_name=guard.name,
            month=month,
            total_shifts=tally.present_shifts,
            gross_salary=gross,
            total_advance=total_advance,
            total_food_cost=food,
            uniform_deduction=guard.uniform_deduction,
            net_salary=net,
            expenses_by_type=by_type,
        )
