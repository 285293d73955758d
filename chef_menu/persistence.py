"""SQLite key-value persistence for the menu snapshot."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from chef_menu.config import DB_PATH
from chef_menu.constant import STORAGE_KEY
from chef_menu.errors import PersistenceError, PersistenceOperation
from chef_menu.models import Dish


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class KeyValueStore:
    """String values stored by key in a single SQLite table."""

    def __init__(self, db_path: str = DB_PATH) -> None:
        self.db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        db_file = Path(self.db_path)
        db_file.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(db_file)

    def bootstrap_schema(self) -> None:
        """Create the key-value table if it does not already exist."""
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                    """
                )
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(PersistenceOperation.WRITE, str(exc)) from exc

    def get_item(self, key: str) -> str | None:
        """Return the stored string for ``key`` or None when absent."""
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(PersistenceOperation.READ, str(exc)) from exc
        if row is None:
            return None
        return str(row[0])

    def set_item(self, key: str, value: str) -> None:
        """Insert or overwrite ``key``."""
        try:
            with self._connect() as conn:
                with conn:
                    conn.execute(
                        """
                        INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                        ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                        """,
                        (key, value, _utc_now_iso()),
                    )
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(PersistenceOperation.WRITE, str(exc)) from exc


def serialize_menu(dishes: Iterable[Dish]) -> str:
    """Encode dishes as the stored JSON array."""
    return json.dumps([dish.to_record() for dish in dishes], ensure_ascii=False, allow_nan=False)


def deserialize_menu(raw: str) -> list[Dish]:
    """Decode the stored JSON array. Raises ValueError on any malformed payload."""
    try:
        payload = json.loads(raw, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise ValueError(f"menu payload is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise ValueError("menu payload must be a JSON array")

    dishes: list[Dish] = []
    for record in payload:
        if not isinstance(record, dict):
            raise ValueError("menu entries must be JSON objects")
        try:
            dishes.append(Dish.from_record(record))
        except (KeyError, TypeError, ArithmeticError) as exc:
            raise ValueError(f"malformed dish record: {exc!r}") from exc
    return dishes


class MenuPersistence:
    """Reads and writes the whole menu under one fixed key."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def bootstrap(self) -> None:
        self.store.bootstrap_schema()

    def load_raw(self) -> str | None:
        return self.store.get_item(self.key)

    def save(self, dishes: Iterable[Dish]) -> None:
        try:
            raw = serialize_menu(dishes)
        except ValueError as exc:
            raise PersistenceError(PersistenceOperation.WRITE, str(exc)) from exc
        self.store.set_item(self.key, raw)
