"""Keyed-collection persistence.

Each collection is a JSON document stored under a stable key. Every mutation is
a single read-modify-write inside one transaction; there is exactly one writer,
so no further locking is done.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Callable, Generic, Hashable, List, Optional, Protocol, Sequence, TypeVar

from ..core.constants import INIT_KEY, SCHEMA_VERSION
from ..core.exceptions import StoreError
from .connection import DatabaseConnection
from .sqlite_base import db_cursor, fetchone

logger = logging.getLogger(__name__)


class StoredRecord(Protocol):
    id: str

    def to_dict(self) -> dict:
        ...


T = TypeVar("T", bound=StoredRecord)


class RecordStore:
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def ensure_schema(self) -> None:
        try:
            with db_cursor(self._conn) as (_, cur):
                cur.execute(
                    "CREATE TABLE IF NOT EXISTS collections ("
                    " key TEXT PRIMARY KEY,"
                    " value TEXT NOT NULL"
                    ")"
                )
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open record store at {self._conn.path}: {e}") from e

    def is_initialized(self) -> bool:
        with db_cursor(self._conn) as (_, cur):
            return self._read_raw(cur, INIT_KEY) is not None

    def mark_initialized(self) -> None:
        with db_cursor(self._conn) as (_, cur):
            self._write_raw(cur, INIT_KEY, "true")

    def has(self, key: str) -> bool:
        with db_cursor(self._conn) as (_, cur):
            return self._read_raw(cur, key) is not None

    def load(self, key: str) -> List[dict]:
        with db_cursor(self._conn) as (_, cur):
            return self._decode(key, self._read_raw(cur, key))

    def save(self, key: str, items: Sequence[dict]) -> None:
        with db_cursor(self._conn) as (_, cur):
            self._write_raw(cur, key, self._encode(items))

    def mutate(self, key: str, change: Callable[[List[dict]], List[dict]]) -> None:
        """Read the whole collection, apply ``change`` and write it back atomically."""
        with db_cursor(self._conn) as (_, cur):
            items = self._decode(key, self._read_raw(cur, key))
            self._write_raw(cur, key, self._encode(change(items)))

    def collection(self, key: str, from_dict: Callable[[dict], T]) -> "Collection[T]":
        return Collection(self, key, from_dict)

    def close(self) -> None:
        self._conn.close()

    @staticmethod
    def _read_raw(cur, key: str) -> Optional[str]:
        cur.execute("SELECT value FROM collections WHERE key = ?", (key,))
        row = fetchone(cur)
        return row[0] if row else None

    @staticmethod
    def _write_raw(cur, key: str, value: str) -> None:
        cur.execute(
            "INSERT INTO collections (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )

    @staticmethod
    def _encode(items: Sequence[dict]) -> str:
        return json.dumps({"version": SCHEMA_VERSION, "items": list(items)}, ensure_ascii=False)

    @staticmethod
    def _decode(key: str, raw: Optional[str]) -> List[dict]:
        if raw is None:
            return []
        try:
            data: Any = json.loads(raw)
        except ValueError:
            logger.warning("Collection %s is not valid JSON; treating it as empty", key)
            return []

        if isinstance(data, list):
            # Layout written before the version envelope existed.
            items = data
        elif isinstance(data, dict) and isinstance(data.get("items"), list):
            version = data.get("version")
            if not isinstance(version, int) or version > SCHEMA_VERSION:
                logger.warning("Collection %s has unsupported version %r; treating it as empty", key, version)
                return []
            items = data["items"]
        else:
            logger.warning("Collection %s has an unexpected shape; treating it as empty", key)
            return []

        return [item for item in items if isinstance(item, dict)]


class Collection(Generic[T]):
    """Typed CRUD view over one stored collection."""

    def __init__(self, store: RecordStore, key: str, from_dict: Callable[[dict], T]):
        self._store = store
        self._key = key
        self._from_dict = from_dict

    @property
    def key(self) -> str:
        return self._key

    def get_all(self) -> List[T]:
        return self._parse(self._store.load(self._key))

    def get(self, item_id: str) -> Optional[T]:
        for item in self.get_all():
            if item.id == item_id:
                return item
        return None

    def add(self, item: T) -> None:
        self._store.mutate(self._key, lambda rows: [*rows, item.to_dict()])

    def replace(self, item: T) -> bool:
        """Swap the record sharing ``item.id``. Returns False when there is none."""
        replaced = False

        def change(rows: List[dict]) -> List[dict]:
            nonlocal replaced
            out = []
            for row in rows:
                if not replaced and row.get("id") == item.id:
                    out.append(item.to_dict())
                    replaced = True
                else:
                    out.append(row)
            return out

        self._store.mutate(self._key, change)
        return replaced

    def delete(self, item_id: str) -> bool:
        removed = False

        def change(rows: List[dict]) -> List[dict]:
            nonlocal removed
            kept = [row for row in rows if row.get("id") != item_id]
            removed = len(kept) != len(rows)
            return kept

        self._store.mutate(self._key, change)
        return removed

    def upsert(self, item: T, *, key: Callable[[T], Hashable]) -> bool:
        """Replace the first record whose natural key matches, else append.

        Returns True when an existing record was replaced.
        """
        target = key(item)
        replaced = False

        def change(rows: List[dict]) -> List[dict]:
            nonlocal replaced
            out = []
            for row in rows:
                if not replaced:
                    existing = self._parse_one(row)
                    if existing is not None and key(existing) == target:
                        out.append(item.to_dict())
                        replaced = True
                        continue
                out.append(row)
            if not replaced:
                out.append(item.to_dict())
            return out

        self._store.mutate(self._key, change)
        return replaced

    def _parse(self, rows: List[dict]) -> List[T]:
        out = []
        for row in rows:
            item = self._parse_one(row)
            if item is not None:
                out.append(item)
        return out

    def _parse_one(self, row: dict) -> Optional[T]:
        try:
            return self._from_dict(row)
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed record in %s: %r", self._key, row.get("id"))
            return None
