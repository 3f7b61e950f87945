from __future__ import annotations

from typing import Dict, List, Optional

from ..common.datetime_utils import in_month, today_iso
from ..common.ids import new_id
from ..common.validators import require_iso_date, require_month, require_non_empty, require_positive
from ..core.enums import ExpenseType
from ..core.exceptions import NotFoundError, ValidationError
from .model import ExpenseRecord
from .repository import ExpenseRepository


class ExpenseService:
    """Use case: book advances and fines against guards."""

    def __init__(self, expenses: ExpenseRepository):
        self._expenses = expenses

    def list_expenses(self) -> List[ExpenseRecord]:
        """Newest date first; same-day entries newest-added first."""
        return sorted(reversed(list(self._expenses.get_all())), key=lambda e: e.date, reverse=True)

    def record_expense(
        self,
        *,
        guard_id: str,
        amount,
        date: Optional[str] = None,
        reason: str = "",
        type: ExpenseType = ExpenseType.ADVANCE,
    ) -> ExpenseRecord:
        try:
            expense_type = ExpenseType(type)
        except ValueError:
            raise ValidationError("Expense type must be Advance, Fine or Other") from None

        expense = ExpenseRecord(
            id=new_id(),
            guard_id=require_non_empty(guard_id, "Guard"),
            date=require_iso_date(date or today_iso(), "Date"),
            amount=require_positive(amount, "Amount"),
            reason=(reason or "").strip(),
            type=expense_type,
        )
        self._expenses.add(expense)
        return expense

    def delete_expense(self, expense_id: str) -> None:
        if not self._expenses.delete(expense_id):
            raise NotFoundError("Expense not found")

    def monthly_total(self, month: str) -> float:
        month = require_month(month)
        return sum(e.amount for e in self._expenses.get_all() if in_month(e.date, month))

    def totals_by_type(self, guard_id: str, month: str) -> Dict[ExpenseType, float]:
        month = require_month(month)
        totals: Dict[ExpenseType, float] = {t: 0 for t in ExpenseType}
        for e in self._expenses.get_all():
            if e.guard_id == guard_id and in_month(e.date, month):
                totals[e.type] += e.amount
        return totals
