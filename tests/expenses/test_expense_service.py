from __future__ import annotations

import pytest

from guard_manager.core.enums import ExpenseType
from guard_manager.core.exceptions import NotFoundError, ValidationError
from guard_manager.expenses.service import ExpenseService
from guard_manager.expenses.store_expense_repository import StoreExpenseRepository


@pytest.fixture
def svc(store):
    return ExpenseService(StoreExpenseRepository(store))


def test_guard_and_positive_amount_required(svc):
    with pytest.raises(ValidationError):
        svc.record_expense(guard_id="", amount=100)
    with pytest.raises(ValidationError):
        svc.record_expense(guard_id="g1", amount=0)
    with pytest.raises(ValidationError):
        svc.record_expense(guard_id="g1", amount=None)
    with pytest.raises(ValidationError):
        svc.record_expense(guard_id="g1", amount=10, type="Bonus")
    assert svc.list_expenses() == []


def test_multiple_entries_same_day_are_kept(svc):
    svc.record_expense(guard_id="g1", amount=200, date="2025-01-05")
    svc.record_expense(guard_id="g1", amount=200, date="2025-01-05")
    assert len(svc.list_expenses()) == 2


def test_defaults_to_advance_today(svc):
    expense = svc.record_expense(guard_id="g1", amount="150")
    assert expense.type == ExpenseType.ADVANCE
    assert expense.amount == 150
    assert len(expense.date) == 10


def test_list_is_newest_first_and_delete(svc):
    old = svc.record_expense(guard_id="g1", amount=10, date="2025-01-01")
    new = svc.record_expense(guard_id="g1", amount=20, date="2025-02-01")

    assert [e.id for e in svc.list_expenses()] == [new.id, old.id]

    svc.delete_expense(old.id)
    assert [e.id for e in svc.list_expenses()] == [new.id]
    with pytest.raises(NotFoundError):
        svc.delete_expense(old.id)


def test_monthly_and_type_totals(svc):
    svc.record_expense(guard_id="g1", amount=300, date="2025-01-03")
    svc.record_expense(guard_id="g1", amount=50, date="2025-01-09", type=ExpenseType.FINE)
    svc.record_expense(guard_id="g2", amount=100, date="2025-01-10", type=ExpenseType.OTHER)
    svc.record_expense(guard_id="g1", amount=999, date="2025-02-01")

    assert svc.monthly_total("2025-01") == 450
    assert svc.totals_by_type("g1", "2025-01") == {
        ExpenseType.ADVANCE: 300,
        ExpenseType.FINE: 50,
        ExpenseType.OTHER: 0,
    }


def test_same_day_entries_list_newest_added_first(svc):
    first = svc.record_expense(guard_id="g1", amount=100, date="2025-01-05")
    second = svc.record_expense(guard_id="g1", amount=200, date="2025-01-05")
    older = svc.record_expense(guard_id="g1", amount=300, date="2025-01-01")

    assert [e.id for e in svc.list_expenses()] == [second.id, first.id, older.id]
