from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from storefront.config import settings
from storefront.errors import AlreadySubscribed, CatalogUnavailable, ValidationError
from storefront.models import Product


class CatalogClient:
    """Reads the catalog API and hands back Product snapshots ready for a CartStore."""

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None):
        self.http = http or httpx.Client(base_url=base_url or settings.api_url)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _get(self, path: str, **params: Any) -> httpx.Response:
        try:
            resp = self.http.get(path, params={k: v for k, v in params.items() if v is not None})
        except httpx.HTTPError as e:
            raise CatalogUnavailable(f"GET {path} failed: {e}") from e
        if resp.status_code >= 500:
            raise CatalogUnavailable(f"GET {path} -> {resp.status_code}")
        return resp

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        resp = self._get("/api/products", category=category)
        return [Product.from_dict(d) for d in resp.json()]

    def get_product(self, product_id: int) -> Optional[Product]:
        resp = self._get(f"/api/products/{product_id}")
        if resp.status_code == 404:
            return None
        return Product.from_dict(resp.json())

    def list_special_offers(self) -> List[Dict[str, Any]]:
        return self._get("/api/special-offers").json()

    def list_hero_slides(self) -> List[Dict[str, Any]]:
        return self._get("/api/hero-slides").json()

    def subscribe(self, email: str) -> Dict[str, Any]:
        try:
            resp = self.http.post("/api/subscribe", json={"email": email})
        except httpx.HTTPError as e:
            raise CatalogUnavailable(f"POST /api/subscribe failed: {e}") from e
        if resp.status_code == 409:
            raise AlreadySubscribed(email)
        if resp.status_code == 400:
            raise ValidationError(resp.json().get("errors") or [{"field": "email", "message": "invalid"}])
        if resp.status_code != 201:
            raise CatalogUnavailable(f"POST /api/subscribe -> {resp.status_code}")
        return resp.json()
