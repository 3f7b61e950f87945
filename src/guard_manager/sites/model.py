from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Site:
    """A client location where guards are posted."""

    id: str
    name: str
    client_name: str = ""
    contact_number: str = ""
    location: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "client_name": self.client_name,
            "contact_number": self.contact_number,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Site":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            client_name=str(data.get("client_name") or ""),
            contact_number=str(data.get("contact_number") or ""),
            location=str(data.get("location") or ""),
        )
