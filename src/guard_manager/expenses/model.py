from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ExpenseType


@dataclass(frozen=True)
class ExpenseRecord:
    """Cash advance, fine or other deduction booked against a guard."""

    id: str
    guard_id: str
    date: str
    amount: float
    reason: str = ""
    type: ExpenseType = ExpenseType.ADVANCE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "guard_id": self.guard_id,
            "date": self.date,
            "amount": self.amount,
            "reason": self.reason,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExpenseRecord":
        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            amount = float(amount)
        return cls(
            id=str(data["id"]),
            guard_id=str(data["guard_id"]),
            date=str(data["date"]),
            amount=amount,
            reason=str(data.get("reason") or ""),
            type=ExpenseType(data.get("type") or ExpenseType.ADVANCE.value),
        )
