from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record identity."""
    return uuid.uuid4().hex
