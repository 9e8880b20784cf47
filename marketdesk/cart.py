"""Shopping carts holding product ids and quantities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .product import Product

__all__ = ["MAX_ITEMS", "CartFullError", "Cart"]

MAX_ITEMS = 100


class CartFullError(Exception):
    """Raised when a new product does not fit into a cart."""


def _display(value: float) -> str:
    return f"{value:g}"


def _index(products: Iterable[Product]) -> dict[int, Product]:
    lookup: dict[int, Product] = {}
    for product in products:
        lookup.setdefault(product.id, product)
    return lookup


@dataclass
class Cart:
    """Product quantities a client intends to buy, in the order added."""

    client_egn: str = ""
    _items: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def add_item(self, product_id: int, quantity: int) -> None:
        """Add ``quantity`` of a product, merging with an existing line."""
        if product_id in self._items:
            self._items[product_id] += quantity
            return
        if len(self._items) >= MAX_ITEMS:
            raise CartFullError("Cart is full.")
        self._items[product_id] = quantity

    def remove_item(self, product_id: int, quantity: int) -> None:
        """Take ``quantity`` of a product out; drop the line when none is left."""
        if product_id not in self._items:
            return
        self._items[product_id] -= quantity
        if self._items[product_id] <= 0:
            del self._items[product_id]

    def view(self, products: Iterable[Product]) -> str:
        """Return a printable listing of the cart with its total."""
        if self.is_empty():
            return "Cart is empty."
        lookup = _index(products)
        lines = ["Items in cart:"]
        total = 0.0
        for product_id, quantity in self._items.items():
            product = lookup.get(product_id)
            if product is None:
                continue
            price = quantity * product.price
            total += price
            lines.append(f"- {quantity}x {product.name} - {_display(price)} BGN")
        lines.append(f"Total price: {_display(total)} BGN")
        return "\n".join(lines)

    def total(self, products: Iterable[Product]) -> float:
        """Return the price of everything in the cart; unknown ids count as nothing."""
        lookup = _index(products)
        total = 0.0
        for product_id, quantity in self._items.items():
            product = lookup.get(product_id)
            if product is not None:
                total += quantity * product.price
        return total

    def is_empty(self) -> bool:
        """Return whether the cart holds nothing."""
        return not self._items

    def items(self) -> list[tuple[int, int]]:
        """Return ``(product_id, quantity)`` pairs in the order added."""
        return list(self._items.items())