from __future__ import annotations

from typing import List, Optional

from ..core.constants import GUARDS_KEY
from ..database.record_store import RecordStore
from .model import Guard


class StoreGuardRepository:
    def __init__(self, store: RecordStore):
        self._items = store.collection(GUARDS_KEY, Guard.from_dict)

    def get_all(self) -> List[Guard]:
        return self._items.get_all()

    def get(self, guard_id: str) -> Optional[Guard]:
        return self._items.get(guard_id)

    def add(self, guard: Guard) -> None:
        self._items.add(guard)

    def update(self, guard: Guard) -> bool:
        return self._items.replace(guard)

    def delete(self, guard_id: str) -> bool:
        return self._items.delete(guard_id)
