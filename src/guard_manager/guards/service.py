from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import List, Optional

from ..common.datetime_utils import today_iso
from ..common.ids import new_id
from ..common.validators import require_iso_date, require_non_empty, require_non_negative
from ..core.constants import UNASSIGNED_SITE, UNKNOWN_GUARD
from ..core.enums import GuardStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..sites.repository import SiteRepository
from .model import Guard
from .repository import GuardRepository


@dataclass(frozen=True)
class GuardRow:
    """Guard joined with its site's display name for listing screens."""

    guard: Guard
    site_name: str


class GuardService:
    """Use case: manage guards and their pay rates."""

    def __init__(self, guards: GuardRepository, sites: SiteRepository, *, rng: Optional[random.Random] = None):
        self._guards = guards
        self._sites = sites
        self._rng = rng or random.Random()

    def list_guards(self) -> List[Guard]:
        return list(self._guards.get_all())

    def get(self, guard_id: str) -> Optional[Guard]:
        return self._guards.get(guard_id)

    def create_guard(
        self,
        *,
        name: str,
        code: str = "",
        phone: str = "",
        national_id: str = "",
        site_id: Optional[str] = None,
        salary_per_shift=0,
        food_cost_per_shift=0,
        uniform_deduction=0,
        joining_date: str = "",
        status: GuardStatus = GuardStatus.ACTIVE,
    ) -> Guard:
        guard = self._validated(
            Guard(
                id=new_id(),
                name=name,
                code=code,
                phone=phone,
                national_id=national_id,
                site_id=site_id,
                salary_per_shift=salary_per_shift,
                food_cost_per_shift=food_cost_per_shift,
                uniform_deduction=uniform_deduction,
                joining_date=joining_date,
                status=status,
            )
        )
        self._guards.add(guard)
        return guard

    def update_guard(self, guard: Guard) -> Guard:
        guard = self._validated(guard)
        if not self._guards.update(guard):
            raise NotFoundError("Guard not found")
        return guard

    def delete_guard(self, guard_id: str) -> None:
        if not self._guards.delete(guard_id):
            raise NotFoundError("Guard not found")

    def roster_for_site(self, site_id: str) -> List[Guard]:
        """Active guards posted at a site, as shown on the attendance sheet."""
        return [g for g in self._guards.get_all() if g.site_id == site_id and g.is_active]

    def guard_name(self, guard_id: str) -> str:
        guard = self._guards.get(guard_id)
        return guard.name if guard else UNKNOWN_GUARD

    def list_with_site_names(self) -> List[GuardRow]:
        names = {s.id: s.name for s in self._sites.get_all()}
        return [GuardRow(guard=g, site_name=names.get(g.site_id or "", UNASSIGNED_SITE)) for g in self._guards.get_all()]

    def _validated(self, guard: Guard) -> Guard:
        try:
            status = GuardStatus(guard.status)
        except ValueError:
            raise ValidationError("Guard status must be Active or Inactive") from None

        code = (guard.code or "").strip() or f"SG-{self._rng.randint(0, 999)}"
        joining_date = (guard.joining_date or "").strip() or today_iso()

        return replace(
            guard,
            name=require_non_empty(guard.name, "Guard name"),
            code=code,
            phone=(guard.phone or "").strip(),
            national_id=(guard.national_id or "").strip(),
            site_id=guard.site_id or None,
            salary_per_shift=require_non_negative(guard.salary_per_shift, "Salary per shift"),
            food_cost_per_shift=require_non_negative(guard.food_cost_per_shift, "Food cost per shift"),
            uniform_deduction=require_non_negative(guard.uniform_deduction, "Uniform deduction"),
            joining_date=require_iso_date(joining_date, "Joining date"),
            status=status,
        )
