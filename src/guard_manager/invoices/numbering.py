from __future__ import annotations

import random
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import INVOICE_NUMBER_MAX, INVOICE_NUMBER_MIN


def fiscal_year(now: date) -> str:
    """April-to-March fiscal year label, e.g. ``2025-26``."""
    if now.month >= 4:
        return f"{now.year}-{(now.year + 1) % 100:02d}"
    return f"{now.year - 1}-{now.year % 100:02d}"


def generate_invoice_number(now: Optional[date] = None, rng: Optional[random.Random] = None) -> str:
    """``INV/<fiscal year>/<random 4 digits>``.

    Not unique by construction; the number stays editable until the invoice is saved.
    """
    now = now or now_local()
    rng = rng or random
    return f"INV/{fiscal_year(now)}/{rng.randint(INVOICE_NUMBER_MIN, INVOICE_NUMBER_MAX)}"
