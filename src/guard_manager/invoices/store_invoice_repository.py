from __future__ import annotations

from typing import List, Optional

from ..core.constants import INVOICES_KEY
from ..database.record_store import RecordStore
from .model import Invoice


class StoreInvoiceRepository:
    def __init__(self, store: RecordStore):
        self._items = store.collection(INVOICES_KEY, Invoice.from_dict)

    def get_all(self) -> List[Invoice]:
        return self._items.get_all()

    def get(self, invoice_id: str) -> Optional[Invoice]:
        return self._items.get(invoice_id)

    def add(self, invoice: Invoice) -> None:
        self._items.add(invoice)

    def delete(self, invoice_id: str) -> bool:
        return self._items.delete(invoice_id)
