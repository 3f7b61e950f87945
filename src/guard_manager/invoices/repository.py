from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Invoice


class InvoiceRepository(Protocol):
    def get_all(self) -> Sequence[Invoice]:
        raise NotImplementedError

    def get(self, invoice_id: str) -> Optional[Invoice]:
        raise NotImplementedError

    def add(self, invoice: Invoice) -> None:
        raise NotImplementedError

    def delete(self, invoice_id: str) -> bool:
        raise NotImplementedError
