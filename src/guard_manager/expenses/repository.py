from __future__ import annotations

from typing import Protocol, Sequence

from .model import ExpenseRecord


class ExpenseRepository(Protocol):
    def get_all(self) -> Sequence[ExpenseRecord]:
        raise NotImplementedError

    def add(self, expense: ExpenseRecord) -> None:
        raise NotImplementedError

    def delete(self, expense_id: str) -> bool:
        raise NotImplementedError
