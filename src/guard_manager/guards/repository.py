from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Guard


class GuardRepository(Protocol):
    """Repository interface for Guard.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_all(self) -> Sequence[Guard]:
        raise NotImplementedError

    def get(self, guard_id: str) -> Optional[Guard]:
        raise NotImplementedError

    def add(self, guard: Guard) -> None:
        raise NotImplementedError

    def update(self, guard: Guard) -> bool:
        raise NotImplementedError

    def delete(self, guard_id: str) -> bool:
        raise NotImplementedError
