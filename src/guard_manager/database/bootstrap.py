from __future__ import annotations

import logging
from typing import List

from ..core.constants import COLLECTION_KEYS, GUARDS_KEY, SITES_KEY
from ..core.enums import GuardStatus
from ..guards.model import Guard
from ..sites.model import Site
from .record_store import RecordStore

logger = logging.getLogger(__name__)


def demo_sites() -> List[Site]:
    return [
        Site(id="s1", name="North Warehouse", client_name="Logistics Corp", contact_number="9876543210", location="Industrial Area A"),
        Site(id="s2", name="City Mall", client_name="Retail Giants", contact_number="9123456780", location="City Center"),
    ]


def demo_guards() -> List[Guard]:
    return [
        Guard(
            id="g1", name="Rajesh Kumar", code="SG-101", phone="9988776655", national_id="1234-5678-9012",
            site_id="s1", salary_per_shift=600, food_cost_per_shift=50, uniform_deduction=0,
            joining_date="2023-01-15", status=GuardStatus.ACTIVE,
        ),
        Guard(
            id="g2", name="Amit Singh", code="SG-102", phone="8877665544", national_id="5678-1234-9012",
            site_id="s1", salary_per_shift=550, food_cost_per_shift=50, uniform_deduction=100,
            joining_date="2023-03-10", status=GuardStatus.ACTIVE,
        ),
        Guard(
            id="g3", name="Suresh Patil", code="SG-103", phone="7766554433", national_id="9012-5678-1234",
            site_id="s2", salary_per_shift=700, food_cost_per_shift=60, uniform_deduction=0,
            joining_date="2023-06-20", status=GuardStatus.ACTIVE,
        ),
    ]


def initialize_store(store: RecordStore, *, seed_demo: bool = True) -> bool:
    """Prepare the store once per data file.

    Creates missing collections and, on the very first run, inserts the demo
    sites and guards. Guarded by the init marker, so later starts change
    nothing. Returns True when this call did the first-run setup.
    """
    store.ensure_schema()
    if store.is_initialized():
        return False

    for key in COLLECTION_KEYS:
        if not store.has(key):
            store.save(key, [])

    if seed_demo:
        store.save(SITES_KEY, [s.to_dict() for s in demo_sites()])
        store.save(GUARDS_KEY, [g.to_dict() for g in demo_guards()])
        logger.info("Seeded demo data: %d sites, %d guards", len(demo_sites()), len(demo_guards()))

    store.mark_initialized()
    return True
