from __future__ import annotations

from typing import List, Optional

from ..core.constants import SITES_KEY
from ..database.record_store import RecordStore
from .model import Site


class StoreSiteRepository:
    def __init__(self, store: RecordStore):
        self._items = store.collection(SITES_KEY, Site.from_dict)

    def get_all(self) -> List[Site]:
        return self._items.get_all()

    def get(self, site_id: str) -> Optional[Site]:
        return self._items.get(site_id)

    def add(self, site: Site) -> None:
        self._items.add(site)

    def update(self, site: Site) -> bool:
        return self._items.replace(site)

    def delete(self, site_id: str) -> bool:
        return self._items.delete(site_id)
