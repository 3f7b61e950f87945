from __future__ import annotations

from typing import List

from ..core.constants import EXPENSES_KEY
from ..database.record_store import RecordStore
from .model import ExpenseRecord


class StoreExpenseRepository:
    def __init__(self, store: RecordStore):
        self._items = store.collection(EXPENSES_KEY, ExpenseRecord.from_dict)

    def get_all(self) -> List[ExpenseRecord]:
        return self._items.get_all()

    def add(self, expense: ExpenseRecord) -> None:
        self._items.add(expense)

    def delete(self, expense_id: str) -> bool:
        return self._items.delete(expense_id)
