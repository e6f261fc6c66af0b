from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from storefront.utils.validators import validate_product


def _dec(v: Optional[Decimal]) -> Optional[str]:
    return None if v is None else str(v)


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str
    category: str  # mobile / laptop / accessory
    price: Decimal
    image_url: str
    original_price: Optional[Decimal] = None
    features: Dict[str, str] = field(default_factory=dict)
    rating: Optional[Decimal] = None
    review_count: int = 0
    badge: Optional[str] = None
    is_new: bool = False
    is_featured: bool = False
    stock_count: int = 0

    @property
    def has_discount(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    @property
    def discount_percent(self) -> Optional[int]:
        if not self.has_discount:
            return None
        percent = (self.original_price - self.price) / self.original_price * 100
        return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "price": _dec(self.price),
            "originalPrice": _dec(self.original_price),
            "imageUrl": self.image_url,
            "features": dict(self.features),
            "rating": _dec(self.rating),
            "reviewCount": self.review_count,
            "badge": self.badge,
            "isNew": self.is_new,
            "isFeatured": self.is_featured,
            "stockCount": self.stock_count,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        pid = d["id"]
        if isinstance(pid, bool):
            raise ValueError(f"bad product id: {pid!r}")
        return cls(id=int(pid), **validate_product(d))


@dataclass(frozen=True)
class SpecialOffer:
    id: int
    title: str
    description: str
    price: Decimal
    original_price: Decimal
    image_url: str
    badge: str
    end_date: str  # ISO date string

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "price": _dec(self.price),
            "originalPrice": _dec(self.original_price),
            "imageUrl": self.image_url,
            "badge": self.badge,
            "endDate": self.end_date,
        }


@dataclass(frozen=True)
class Subscriber:
    id: int
    email: str
    subscribed_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "subscribedAt": self.subscribed_at}


@dataclass
class CartLine:
    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        d = self.product.to_dict()
        d["quantity"] = self.quantity
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CartLine":
        qty = d["quantity"]
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
            raise ValueError(f"bad quantity: {qty!r}")
        return cls(product=Product.from_dict(d), quantity=qty)
