from __future__ import annotations

from typing import Any, Dict, List, Optional

from storefront.models import Product, SpecialOffer, Subscriber
from storefront.utils.validators import validate_product, validate_special_offer


class CatalogRepository:
    """In-memory catalog: products, special offers and newsletter subscribers.

    Ids come from one counter per kind, starting at 1 and never reused.
    Lookups by unknown id return None.
    """

    def __init__(self):
        self._products: Dict[int, Product] = {}
        self._offers: Dict[int, SpecialOffer] = {}
        self._subscribers: Dict[int, Subscriber] = {}

        self._product_seq = 1
        self._offer_seq = 1
        self._subscriber_seq = 1

    # ---------------- products ----------------

    def create_product(self, data: Dict[str, Any]) -> Product:
        fields = validate_product(data)
        product = Product(id=self._product_seq, **fields)
        self._product_seq += 1
        self._products[product.id] = product
        return product

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def list_products(self) -> List[Product]:
        return list(self._products.values())

    def list_products_by_category(self, category: str) -> List[Product]:
        return [p for p in self._products.values() if p.category == category]

    def featured_product(self) -> Optional[Product]:
        return next((p for p in self._products.values() if p.is_featured), None)

    # ---------------- special offers ----------------

    def create_special_offer(self, data: Dict[str, Any]) -> SpecialOffer:
        fields = validate_special_offer(data)
        offer = SpecialOffer(id=self._offer_seq, **fields)
        self._offer_seq += 1
        self._offers[offer.id] = offer
        return offer

    def get_special_offer(self, offer_id: int) -> Optional[SpecialOffer]:
        return self._offers.get(offer_id)

    def list_special_offers(self) -> List[SpecialOffer]:
        return list(self._offers.values())

    # ---------------- subscribers ----------------

    def create_subscriber(self, email: str, subscribed_at: str) -> Subscriber:
        sub = Subscriber(id=self._subscriber_seq, email=email, subscribed_at=subscribed_at)
        self._subscriber_seq += 1
        self._subscribers[sub.id] = sub
        return sub

    def get_subscriber(self, subscriber_id: int) -> Optional[Subscriber]:
        return self._subscribers.get(subscriber_id)

    def get_subscriber_by_email(self, email: str) -> Optional[Subscriber]:
        email = email.lower()
        return next((s for s in self._subscribers.values() if s.email.lower() == email), None)
