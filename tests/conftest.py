"""Shared pytest fixtures for storefront tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.cart.store import CartStore
from storefront.catalog.repository import CatalogRepository
from storefront.catalog.seed import seed_catalog
from storefront.db.kv import MemoryKeyValueStore, SqliteKeyValueStore
from storefront.models import Product
from storefront.web.main import create_app


def make_product(id=1, price="100", name=None, **extra):
    return Product(
        id=id,
        name=name or f"Product {id}",
        description="test product",
        category=extra.pop("category", "mobile"),
        price=Decimal(price),
        image_url=f"https://img.example/{id}.jpg",
        **extra,
    )


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def sqlite_kv(tmp_path):
    return SqliteKeyValueStore(str(tmp_path / "carts.db"))


@pytest.fixture
def notices():
    """Collects (title, description) pairs sent by a CartStore."""
    return []


@pytest.fixture
def store(kv, notices):
    return CartStore(kv, notify=lambda title, desc: notices.append((title, desc)))


@pytest.fixture
def repo():
    r = CatalogRepository()
    seed_catalog(r)
    return r


@pytest.fixture
def test_client(repo):
    return TestClient(create_app(repo))
