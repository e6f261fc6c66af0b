from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from storefront.constants import CATEGORIES, DEFAULT_RATING
from storefront.errors import ValidationError

log = logging.getLogger(__name__)

CENTS = Decimal("0.01")
TENTHS = Decimal("0.1")


def normalize_features(raw: Any) -> Dict[str, str]:
    """
    Accepts "key:value" strings, {"key": k, "value": v} objects or a plain mapping.
    Anything else is logged and dropped.
    """
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return {str(k).strip(): str(v).strip() for k, v in raw.items()}
    if not isinstance(raw, (list, tuple)):
        log.warning("features: expected a list, got %s", type(raw).__name__)
        return {}

    out: Dict[str, str] = {}
    for entry in raw:
        if isinstance(entry, str):
            key, sep, value = entry.partition(":")
            if not sep or not key.strip():
                log.warning("features: skipping malformed entry %r", entry)
                continue
            out[key.strip()] = value.strip()
        elif isinstance(entry, dict) and set(entry) == {"key", "value"}:
            out[str(entry["key"]).strip()] = str(entry["value"]).strip()
        else:
            log.warning("features: skipping malformed entry %r", entry)
    return out


def _decimal(data: Dict[str, Any], key: str, errors: List[dict], quantum: Decimal) -> Optional[Decimal]:
    v = data.get(key)
    if v is None or v == "":
        return None
    try:
        d = Decimal(str(v))
    except InvalidOperation:
        errors.append({"field": key, "message": "must be a decimal number"})
        return None
    if not d.is_finite():
        errors.append({"field": key, "message": "must be a decimal number"})
        return None
    return d.quantize(quantum)


def _count(data: Dict[str, Any], key: str, errors: List[dict]) -> int:
    v = data.get(key)
    if v is None:
        return 0
    if isinstance(v, bool) or not isinstance(v, int):
        errors.append({"field": key, "message": "must be an integer"})
        return 0
    if v < 0:
        errors.append({"field": key, "message": "must be >= 0"})
    return v


def _required_text(data: Dict[str, Any], key: str, errors: List[dict]) -> str:
    v = data.get(key)
    if not isinstance(v, str) or not v.strip():
        errors.append({"field": key, "message": "required"})
        return ""
    return v.strip()


def validate_product(data: Dict[str, Any]) -> Dict[str, Any]:
    # returns Product kwargs (minus id) or raises ValidationError
    errors: List[dict] = []

    name = _required_text(data, "name", errors)
    description = _required_text(data, "description", errors)
    image_url = _required_text(data, "imageUrl", errors)

    category = data.get("category")
    if category not in CATEGORIES:
        errors.append({"field": "category", "message": f"must be one of {', '.join(CATEGORIES)}"})

    price = _decimal(data, "price", errors, CENTS)
    if price is None:
        if not any(e["field"] == "price" for e in errors):
            errors.append({"field": "price", "message": "required"})
    elif price <= 0:
        errors.append({"field": "price", "message": "must be > 0"})

    original_price = _decimal(data, "originalPrice", errors, CENTS)
    if original_price is not None and price is not None and original_price < price:
        errors.append({"field": "originalPrice", "message": "must be >= price"})

    rating = _decimal(data, "rating", errors, TENTHS)
    if "rating" not in data:
        rating = Decimal(DEFAULT_RATING)
    if rating is not None and not (0 <= rating <= 5):
        errors.append({"field": "rating", "message": "must be between 0 and 5"})

    review_count = _count(data, "reviewCount", errors)
    stock_count = _count(data, "stockCount", errors)

    if errors:
        raise ValidationError(errors)

    return {
        "name": name,
        "description": description,
        "category": category,
        "price": price,
        "original_price": original_price,
        "image_url": image_url,
        "features": normalize_features(data.get("features")),
        "rating": rating,
        "review_count": review_count,
        "badge": data.get("badge") or None,
        "is_new": bool(data.get("isNew", False)),
        "is_featured": bool(data.get("isFeatured", False)),
        "stock_count": stock_count,
    }


def validate_special_offer(data: Dict[str, Any]) -> Dict[str, Any]:
    errors: List[dict] = []

    title = _required_text(data, "title", errors)
    description = _required_text(data, "description", errors)
    image_url = _required_text(data, "imageUrl", errors)
    badge = _required_text(data, "badge", errors)
    end_date = _required_text(data, "endDate", errors)

    price = _decimal(data, "price", errors, CENTS)
    original_price = _decimal(data, "originalPrice", errors, CENTS)
    if price is None or original_price is None:
        for key, v in (("price", price), ("originalPrice", original_price)):
            if v is None and not any(e["field"] == key for e in errors):
                errors.append({"field": key, "message": "required"})
    else:
        if price <= 0:
            errors.append({"field": "price", "message": "must be > 0"})
        if original_price < price:
            errors.append({"field": "originalPrice", "message": "must be >= price"})

    if errors:
        raise ValidationError(errors)

    return {
        "title": title,
        "description": description,
        "price": price,
        "original_price": original_price,
        "image_url": image_url,
        "badge": badge,
        "end_date": end_date,
    }


def normalize_email(email: Any) -> str:
    if not isinstance(email, str) or "@" not in email.strip():
        raise ValidationError([{"field": "email", "message": "Please enter a valid email address"}])
    return email.strip()
