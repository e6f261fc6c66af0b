"""Catalog repository, ingestion validation and seed data."""
import logging
from decimal import Decimal

import pytest

from storefront.catalog.repository import CatalogRepository
from storefront.catalog.seed import seed_catalog
from storefront.errors import ValidationError
from storefront.utils.validators import normalize_features


def product_data(**overrides):
    data = {
        "name": "Pixel 7 Pro",
        "description": "6.3\" OLED Display",
        "category": "mobile",
        "price": "749",
        "imageUrl": "https://img.example/pixel.jpg",
        "features": ["processor:Google Tensor"],
        "reviewCount": 52,
        "stockCount": 20,
    }
    data.update(overrides)
    return data


def offer_data(**overrides):
    data = {
        "title": "Bundle",
        "description": "Phone + earbuds",
        "price": "1099",
        "originalPrice": "1228",
        "imageUrl": "https://img.example/bundle.jpg",
        "badge": "Deal of the Day",
        "endDate": "2030-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return data


class TestRepository:

    def test_ids_start_at_one_and_increase(self):
        repo = CatalogRepository()
        a = repo.create_product(product_data())
        b = repo.create_product(product_data(name="Other"))
        assert (a.id, b.id) == (1, 2)

    def test_counters_are_per_kind(self):
        repo = CatalogRepository()
        repo.create_product(product_data())
        repo.create_product(product_data())
        offer = repo.create_special_offer(offer_data())
        sub = repo.create_subscriber("a@example.com", "2025-01-01T00:00:00+00:00")
        assert offer.id == 1
        assert sub.id == 1

    def test_unknown_id_returns_none(self):
        repo = CatalogRepository()
        assert repo.get_product(999) is None
        assert repo.get_special_offer(1) is None
        assert repo.get_subscriber(1) is None

    def test_by_category_exact_match(self, repo):
        assert len(repo.list_products_by_category("mobile")) == 5
        assert len(repo.list_products_by_category("laptop")) == 3
        assert len(repo.list_products_by_category("accessory")) == 4
        assert repo.list_products_by_category("Mobile") == []
        assert repo.list_products_by_category("tablet") == []

    def test_ingested_values_are_normalized(self):
        p = CatalogRepository().create_product(product_data(price="749", rating="4.55"))
        assert p.price == Decimal("749.00")
        assert p.rating == Decimal("4.6")
        assert p.features == {"processor": "Google Tensor"}
        assert p.is_new is False and p.is_featured is False

    def test_rating_defaults_when_missing(self):
        p = CatalogRepository().create_product(product_data())
        assert p.rating == Decimal("4.0")

    def test_subscriber_lookup_ignores_case(self):
        repo = CatalogRepository()
        repo.create_subscriber("Ann@Example.com", "2025-01-01T00:00:00+00:00")
        assert repo.get_subscriber_by_email("ann@example.com").id == 1
        assert repo.get_subscriber_by_email("bob@example.com") is None


class TestValidation:

    @pytest.mark.parametrize("overrides, field", [
        ({"category": "tablet"}, "category"),
        ({"price": "0"}, "price"),
        ({"price": "-5"}, "price"),
        ({"price": "cheap"}, "price"),
        ({"price": None}, "price"),
        ({"originalPrice": "700"}, "originalPrice"),
        ({"rating": "5.5"}, "rating"),
        ({"reviewCount": -1}, "reviewCount"),
        ({"stockCount": -2}, "stockCount"),
        ({"stockCount": "many"}, "stockCount"),
        ({"name": "  "}, "name"),
    ])
    def test_rejects_bad_product(self, overrides, field):
        with pytest.raises(ValidationError) as exc:
            CatalogRepository().create_product(product_data(**overrides))
        assert field in [e["field"] for e in exc.value.errors]

    def test_rejected_product_does_not_consume_id(self):
        repo = CatalogRepository()
        with pytest.raises(ValidationError):
            repo.create_product(product_data(category="tv"))
        assert repo.create_product(product_data()).id == 1

    def test_offer_requires_original_price(self):
        with pytest.raises(ValidationError) as exc:
            CatalogRepository().create_special_offer(offer_data(originalPrice=None))
        assert exc.value.errors == [{"field": "originalPrice", "message": "required"}]


class TestFeatures:

    def test_mixed_shapes(self, caplog):
        raw = ["battery:24h", {"key": "gps", "value": "Built-in"}, "bogus", 42, {"name": "x"}]
        with caplog.at_level(logging.WARNING):
            out = normalize_features(raw)

        assert out == {"battery": "24h", "gps": "Built-in"}
        assert caplog.text.count("skipping malformed entry") == 3

    def test_value_may_contain_colon(self):
        assert normalize_features(["ratio:16:9"]) == {"ratio": "16:9"}

    def test_mapping_passes_through(self):
        assert normalize_features({"power": "15W"}) == {"power": "15W"}

    def test_none_is_empty(self):
        assert normalize_features(None) == {}


class TestDiscount:

    @pytest.mark.parametrize("price, original, percent", [
        ("849", "999", 15),
        ("999", "1099", 9),
        ("1599", "1999", 20),
        ("100", None, None),
        ("100", "100", None),
    ])
    def test_discount_percent(self, price, original, percent):
        p = CatalogRepository().create_product(product_data(price=price, originalPrice=original))
        assert p.discount_percent == percent


class TestSeed:

    def test_seed_contents(self, repo):
        products = repo.list_products()
        assert len(products) == 12
        assert len(repo.list_special_offers()) == 2
        assert repo.featured_product().name == "UltraPhone X23 Pro"
        assert repo.get_product(1).features["camera"] == "108MP Camera"

    def test_seed_is_idempotent(self, repo):
        seed_catalog(repo)
        assert len(repo.list_products()) == 12
        assert len(repo.list_special_offers()) == 2

    def test_no_featured_product(self):
        assert CatalogRepository().featured_product() is None
