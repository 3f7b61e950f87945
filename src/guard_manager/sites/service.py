from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..common.ids import new_id
from ..common.validators import require_non_empty
from ..core.constants import UNASSIGNED_SITE
from ..core.exceptions import NotFoundError
from .model import Site
from .repository import SiteRepository


class SiteService:
    """Use case: manage client sites."""

    def __init__(self, sites: SiteRepository):
        self._sites = sites

    def list_sites(self) -> List[Site]:
        return list(self._sites.get_all())

    def get(self, site_id: str) -> Optional[Site]:
        return self._sites.get(site_id)

    def create_site(
        self,
        *,
        name: str,
        client_name: str = "",
        contact_number: str = "",
        location: str = "",
    ) -> Site:
        site = Site(
            id=new_id(),
            name=require_non_empty(name, "Site name"),
            client_name=(client_name or "").strip(),
            contact_number=(contact_number or "").strip(),
            location=(location or "").strip(),
        )
        self._sites.add(site)
        return site

    def update_site(self, site: Site) -> Site:
        site = replace(site, name=require_non_empty(site.name, "Site name"))
        if not self._sites.update(site):
            raise NotFoundError("Site not found")
        return site

    def delete_site(self, site_id: str) -> None:
        # Guards keep their site_id; lookups report them as unassigned.
        if not self._sites.delete(site_id):
            raise NotFoundError("Site not found")

    def site_name(self, site_id: Optional[str]) -> str:
        if not site_id:
            return UNASSIGNED_SITE
        site = self._sites.get(site_id)
        return site.name if site else UNASSIGNED_SITE
