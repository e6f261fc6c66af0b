import os

import pytest

from storefront.db.kv import MemoryKeyValueStore, SqliteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def any_kv(request, tmp_path):
    if request.param == "memory":
        return MemoryKeyValueStore()
    return SqliteKeyValueStore(str(tmp_path / "kv.db"))


def test_missing_key_is_none(any_kv):
    assert any_kv.get("cart_guest") is None


def test_last_write_wins(any_kv):
    any_kv.set("cart_u1", "[]")
    any_kv.set("cart_u1", '[{"id": 1}]')
    assert any_kv.get("cart_u1") == '[{"id": 1}]'


def test_delete_and_prefix(any_kv):
    any_kv.set("cart_b", "[]")
    any_kv.set("cart_a", "[]")
    any_kv.set("theme", "dark")
    any_kv.delete("cart_b")
    any_kv.delete("missing")

    assert any_kv.keys("cart_") == ["cart_a"]
    assert any_kv.keys() == ["cart_a", "theme"]


def test_sqlite_survives_reopen(tmp_path):
    path = str(tmp_path / "nested" / "carts.db")
    SqliteKeyValueStore(path).set("cart_guest", "[]")

    assert os.path.exists(path)
    assert SqliteKeyValueStore(path).get("cart_guest") == "[]"
