from __future__ import annotations

import json
import threading

from guard_manager.core.constants import ATTENDANCE_KEY, GUARDS_KEY, INIT_KEY, SITES_KEY
from guard_manager.database.bootstrap import initialize_store
from guard_manager.database.record_store import RecordStore
from guard_manager.database.sqlite_base import db_cursor
from guard_manager.sites.model import Site


def _write_raw(conn, key, value):
    with db_cursor(conn) as (_, cur):
        cur.execute(
            "INSERT INTO collections (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )


def _read_raw(conn, key):
    with db_cursor(conn) as (_, cur):
        cur.execute("SELECT value FROM collections WHERE key = ?", (key,))
        row = cur.fetchone()
        return row[0] if row else None


def test_first_initialize_seeds_demo_data_once(conn):
    store = RecordStore(conn)

    assert initialize_store(store, seed_demo=True) is True
    assert [s["id"] for s in store.load(SITES_KEY)] == ["s1", "s2"]
    assert len(store.load(GUARDS_KEY)) == 3
    assert store.load(ATTENDANCE_KEY) == []

    store.save(SITES_KEY, [])
    assert initialize_store(store, seed_demo=True) is False
    assert store.load(SITES_KEY) == []


def test_initialize_without_seed_creates_empty_collections(store):
    assert store.is_initialized()
    assert store.has(SITES_KEY)
    assert store.load(SITES_KEY) == []
    assert store.load(GUARDS_KEY) == []


def test_collections_are_written_with_version_envelope(conn, store):
    sites = store.collection(SITES_KEY, Site.from_dict)
    sites.add(Site(id="a", name="Gate 1"))

    data = json.loads(_read_raw(conn, SITES_KEY))
    assert data["version"] == 1
    assert data["items"][0]["name"] == "Gate 1"
    assert _read_raw(conn, INIT_KEY) == "true"


def test_add_get_replace_delete(store):
    sites = store.collection(SITES_KEY, Site.from_dict)
    sites.add(Site(id="a", name="Gate 1"))
    sites.add(Site(id="b", name="Gate 2"))

    assert sites.get("b").name == "Gate 2"
    assert sites.replace(Site(id="b", name="Gate 2B")) is True
    assert sites.replace(Site(id="zzz", name="ghost")) is False
    assert [s.name for s in sites.get_all()] == ["Gate 1", "Gate 2B"]

    assert sites.delete("a") is True
    assert sites.delete("a") is False
    assert [s.id for s in sites.get_all()] == ["b"]


def test_upsert_replaces_first_match_on_natural_key(store):
    sites = store.collection(SITES_KEY, Site.from_dict)
    by_name = lambda s: s.name  # noqa: E731

    assert sites.upsert(Site(id="1", name="Mall", location="old"), key=by_name) is False
    assert sites.upsert(Site(id="2", name="Mall", location="new"), key=by_name) is True

    items = sites.get_all()
    assert len(items) == 1
    assert items[0].id == "2"
    assert items[0].location == "new"


def test_unparsable_collection_reads_as_empty(conn, store):
    _write_raw(conn, SITES_KEY, "{not json")
    assert store.collection(SITES_KEY, Site.from_dict).get_all() == []


def test_newer_schema_version_reads_as_empty(conn, store):
    _write_raw(conn, SITES_KEY, json.dumps({"version": 99, "items": [{"id": "a", "name": "X"}]}))
    assert store.load(SITES_KEY) == []


def test_legacy_bare_array_is_accepted(conn, store):
    _write_raw(conn, SITES_KEY, json.dumps([{"id": "a", "name": "Legacy"}]))
    assert [s.name for s in store.collection(SITES_KEY, Site.from_dict).get_all()] == ["Legacy"]


def test_malformed_records_are_skipped_but_kept_on_write(conn, store):
    _write_raw(conn, SITES_KEY, json.dumps({"version": 1, "items": [{"id": "bad"}, {"id": "ok", "name": "Fine"}, 5]}))
    sites = store.collection(SITES_KEY, Site.from_dict)

    assert [s.id for s in sites.get_all()] == ["ok"]

    sites.add(Site(id="new", name="New"))
    ids = [row.get("id") for row in json.loads(_read_raw(conn, SITES_KEY))["items"]]
    assert ids == ["bad", "ok", "new"]


def test_concurrent_adds_from_threads_are_all_kept(store):
    sites = store.collection(SITES_KEY, Site.from_dict)

    def add_many(prefix):
        for n in range(20):
            sites.add(Site(id=f"{prefix}{n}", name=f"Gate {prefix}{n}"))

    threads = [threading.Thread(target=add_many, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(sites.get_all()) == 80
