from __future__ import annotations

from itertools import count

import pytest

from chef_menu.errors import PersistenceError, PersistenceOperation
from chef_menu.menu_store import MenuStore
from chef_menu.persistence import KeyValueStore, MenuPersistence


class BrokenKeyValueStore(KeyValueStore):
    """Key-value store whose reads and/or writes always fail."""

    def __init__(self, db_path: str, fail_reads: bool = False, fail_writes: bool = True) -> None:
        super().__init__(db_path)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise PersistenceError(PersistenceOperation.READ, "disk unavailable")
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceError(PersistenceOperation.WRITE, "disk full")
        super().set_item(key, value)


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "menu.db")


@pytest.fixture
def kv_store(db_path) -> KeyValueStore:
    store = KeyValueStore(db_path)
    store.bootstrap_schema()
    return store


@pytest.fixture
def clock():
    ticks = count(1_700_000_000_000, 1000)
    return lambda: next(ticks)


@pytest.fixture
def store(kv_store, clock) -> MenuStore:
    menu_store = MenuStore(MenuPersistence(kv_store), clock=clock)
    menu_store.load()
    return menu_store
