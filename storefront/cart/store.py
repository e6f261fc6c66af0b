from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from storefront.constants import CART_KEY_PREFIX, GUEST_SCOPE
from storefront.models import CartLine, Product
from storefront.utils.formatters import money

log = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]


def _log_notice(title: str, description: str) -> None:
    log.info("%s: %s", title, description)


def _whole_quantity(quantity) -> int:
    # 2, 2.0 and Decimal("2") are the same quantity; 2.5 and True are not
    if isinstance(quantity, bool):
        raise ValueError(f"quantity must be a whole number, got {quantity!r}")
    if isinstance(quantity, int):
        return quantity
    if isinstance(quantity, float) and quantity.is_integer():
        return int(quantity)
    if isinstance(quantity, Decimal) and quantity.is_finite() and quantity == quantity.to_integral_value():
        return int(quantity)
    raise ValueError(f"quantity must be a whole number, got {quantity!r}")


class CartStore:
    """
    Cart for the active scope (a signed-in user id, or the guest bucket).

    Every mutation rewrites the whole cart under ``cart_<scope>`` in the
    key-value store. Switching scope drops the in-memory cart and loads the
    new scope's stored copy; nothing is carried across.
    """

    def __init__(self, kv, notify: Optional[Notifier] = None, user_id: Optional[str] = None):
        self.kv = kv
        self.notify = notify or _log_notice
        self.user_id = user_id
        self.is_open = False
        self._lines: List[CartLine] = []
        self._load()

    # ---------------- scope ----------------

    @property
    def cart_key(self) -> str:
        return f"{CART_KEY_PREFIX}{self.user_id if self.user_id else GUEST_SCOPE}"

    def set_user(self, user_id: Optional[str]) -> None:
        self.user_id = user_id or None
        self.is_open = False
        self._load()

    def _load(self) -> None:
        self._lines = []
        raw = self.kv.get(self.cart_key)
        if raw is None:
            return
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError(f"expected a list, got {type(records).__name__}")
            lines: List[CartLine] = []
            for rec in records:
                line = CartLine.from_dict(rec)
                existing = next((x for x in lines if x.product_id == line.product_id), None)
                if existing:
                    existing.quantity += line.quantity
                else:
                    lines.append(line)
        except (ValueError, KeyError, TypeError, AttributeError, ArithmeticError, RecursionError) as e:
            log.warning("discarding unreadable cart %s: %s", self.cart_key, e)
            return
        self._lines = lines

    def _save(self) -> None:
        self.kv.set(self.cart_key, json.dumps([x.to_dict() for x in self._lines]))

    # ---------------- reads ----------------

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    @property
    def count(self) -> int:
        return sum(x.quantity for x in self._lines)

    @property
    def total(self) -> Decimal:
        return sum((x.line_total for x in self._lines), Decimal("0"))

    def get_line(self, product_id: int) -> Optional[CartLine]:
        for x in self._lines:
            if x.product_id == product_id:
                return x
        return None

    def summary(self) -> str:
        if not self._lines:
            return "Cart is empty"
        rows = [f"• {x.product.name} × {x.quantity} = {money(x.line_total)}" for x in self._lines]
        rows.append(f"Total: {money(self.total)} ({self.count} items)")
        return "\n".join(rows)

    # ---------------- mutations ----------------

    def add_to_cart(self, product: Product) -> None:
        line = self.get_line(product.id)
        if line:
            line.quantity += 1
        else:
            self._lines.append(CartLine(product=product, quantity=1))
        self._save()
        self.notify("Item added to cart", f"{product.name} has been added to your cart")
        self.is_open = True

    def remove_from_cart(self, product_id: int) -> None:
        line = self.get_line(product_id)
        if line is None:
            return
        self._lines.remove(line)
        self._save()
        self.notify("Item removed", "The item has been removed from your cart")

    def update_quantity(self, product_id: int, quantity: int) -> None:
        quantity = _whole_quantity(quantity)
        if quantity < 1:
            self.remove_from_cart(product_id)
            return
        line = self.get_line(product_id)
        if line is None or line.quantity == quantity:
            return
        line.quantity = quantity
        self._save()

    def clear_cart(self) -> None:
        self._lines = []
        self._save()
        self.notify("Cart cleared", "All items have been removed from your cart")

    def toggle_cart(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open
