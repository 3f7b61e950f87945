from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class StoreConfig:
    path: str


class DatabaseConnection:
    """Connection factory for the single-file local store.

    Note: one process, one writer. The connection is opened lazily and reused
    for every operation so an in-memory store survives between calls; ``lock``
    serializes units of work across request threads.
    """

    def __init__(self, config: StoreConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._config.path

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            if self._config.path != ":memory:":
                Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self._config.path, check_same_thread=False)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
