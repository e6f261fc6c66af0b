from __future__ import annotations

from typing import Dict, Iterable, List

from storefront.constants import (
    CATEGORIES,
    SORT_NEWEST,
    SORT_POPULARITY,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
)
from storefront.models import Product

# client-side helpers: the API hands out the full list, ordering happens here


def sort_products(products: Iterable[Product], mode: str) -> List[Product]:
    items = list(products)
    if mode == SORT_PRICE_ASC:
        return sorted(items, key=lambda p: p.price)
    if mode == SORT_PRICE_DESC:
        return sorted(items, key=lambda p: p.price, reverse=True)
    if mode == SORT_NEWEST:
        return sorted(items, key=lambda p: not p.is_new)
    if mode == SORT_POPULARITY:
        return sorted(items, key=lambda p: p.review_count, reverse=True)
    return items


def group_by_category(products: Iterable[Product]) -> Dict[str, List[Product]]:
    groups: Dict[str, List[Product]] = {c: [] for c in CATEGORIES}
    for p in products:
        groups.setdefault(p.category, []).append(p)
    return groups


def related_products(products: Iterable[Product], product_id: int, limit: int = 4) -> List[Product]:
    return [p for p in products if p.id != product_id][:limit]
