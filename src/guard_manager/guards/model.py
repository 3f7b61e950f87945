from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import GuardStatus


@dataclass(frozen=True)
class Guard:
    """A guard on the payroll.

    ``site_id`` may point to a deleted site; readers treat that as unassigned.
    """

    id: str
    name: str
    code: str
    phone: str = ""
    national_id: str = ""
    site_id: Optional[str] = None
    salary_per_shift: float = 0
    food_cost_per_shift: float = 0
    uniform_deduction: float = 0
    joining_date: str = ""
    status: GuardStatus = GuardStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == GuardStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "phone": self.phone,
            "national_id": self.national_id,
            "site_id": self.site_id,
            "salary_per_shift": self.salary_per_shift,
            "food_cost_per_shift": self.food_cost_per_shift,
            "uniform_deduction": self.uniform_deduction,
            "joining_date": self.joining_date,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Guard":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            code=str(data.get("code") or ""),
            phone=str(data.get("phone") or ""),
            national_id=str(data.get("national_id") or ""),
            site_id=data.get("site_id") or None,
            salary_per_shift=_number(data.get("salary_per_shift")),
            food_cost_per_shift=_number(data.get("food_cost_per_shift")),
            uniform_deduction=_number(data.get("uniform_deduction")),
            joining_date=str(data.get("joining_date") or ""),
            status=GuardStatus(data.get("status") or GuardStatus.ACTIVE.value),
        )


def _number(value) -> float:
    if value is None or value == "":
        return 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return float(value)
