from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Site


class SiteRepository(Protocol):
    def get_all(self) -> Sequence[Site]:
        raise NotImplementedError

    def get(self, site_id: str) -> Optional[Site]:
        raise NotImplementedError

    def add(self, site: Site) -> None:
        raise NotImplementedError

    def update(self, site: Site) -> bool:
        raise NotImplementedError

    def delete(self, site_id: str) -> bool:
        raise NotImplementedError
