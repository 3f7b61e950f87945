from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance.aggregator import AttendanceAggregator
from ..common.datetime_utils import in_month, month_of
from ..expenses.repository import ExpenseRepository
from ..guards.repository import GuardRepository
from ..sites.repository import SiteRepository


@dataclass(frozen=True)
class DashboardStats:
    active_guards: int
    total_sites: int
    shifts_today: int
    monthly_expense: float

    def to_dict(self) -> dict:
        return {
            "active_guards": self.active_guards,
            "total_sites": self.total_sites,
            "shifts_today": self.shifts_today,
            "monthly_expense": self.monthly_expense,
        }


class DashboardService:
    def __init__(
        self,
        guards: GuardRepository,
        sites: SiteRepository,
        aggregator: AttendanceAggregator,
        expenses: ExpenseRepository,
    ):
        self._guards = guards
        self._sites = sites
        self._aggregator = aggregator
        self._expenses = expenses

    def stats(self, today: date) -> DashboardStats:
        month = month_of(today)
        return DashboardStats(
            active_guards=sum(1 for g in self._guards.get_all() if g.is_active),
            total_sites=len(self._sites.get_all()),
            shifts_today=self._aggregator.present_on(today.isoformat()),
            monthly_expense=sum(e.amount for e in self._expenses.get_all() if in_month(e.date, month)),
        )
