from __future__ import annotations

import os
import sqlite3
from datetime import datetime
from typing import Dict, List, Optional

from storefront.config import settings

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schema.sql")


class SqliteKeyValueStore:
    """
    Local key -> text store on a sqlite file. Plays the part of the browser's
    localStorage: one writer at a time, last write wins, no versioning.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or settings.db_path
        self.init_db()

    def _connect(self) -> sqlite3.Connection:
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
                conn.executescript(f.read())
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        updated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        conn = self._connect()
        try:
            conn.execute(
                "INSERT OR REPLACE INTO kv(key, value, updated_at) VALUES(?,?,?)",
                (key, value, updated_at),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self, prefix: str = "") -> List[str]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT key FROM kv WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            ).fetchall()
            return [r["key"] for r in rows]
        finally:
            conn.close()


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._data if k.startswith(prefix))
