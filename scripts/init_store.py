from __future__ import annotations

import importlib

from dotenv import load_dotenv

from guard_manager.database.bootstrap import initialize_store
from guard_manager.database.connection import DatabaseConnection, StoreConfig
from guard_manager.database.record_store import RecordStore
from guard_manager.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store = RecordStore(DatabaseConnection(StoreConfig(path=settings.STORE_PATH)))
    try:
        created = initialize_store(store, seed_demo=bool(getattr(settings, "SEED_DEMO_DATA", False)))
    finally:
        store.close()

    if created:
        print(f"OK: Initialized store -> {settings.STORE_PATH}")
    else:
        print(f"OK: Store already initialized -> {settings.STORE_PATH}")


if __name__ == "__main__":
    main()
