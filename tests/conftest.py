from __future__ import annotations

import pytest

from guard_manager.container import build_container
from guard_manager.database.bootstrap import initialize_store
from guard_manager.database.connection import DatabaseConnection, StoreConfig
from guard_manager.database.record_store import RecordStore


@pytest.fixture
def conn():
    conn = DatabaseConnection(StoreConfig(path=":memory:"))
    yield conn
    conn.close()


@pytest.fixture
def store(conn):
    store = RecordStore(conn)
    initialize_store(store, seed_demo=False)
    return store


@pytest.fixture
def container():
    c = build_container(store_path=":memory:", seed_demo=True)
    yield c
    c.store.close()
