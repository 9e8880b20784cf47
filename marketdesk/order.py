"""Orders placed by clients at checkout."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

from .textutil import format_float, parse_int

__all__ = ["MAX_ORDER_ITEMS", "OrderStatus", "Order", "latest_order_id"]

PathLike = Union[str, "os.PathLike[str]"]

MAX_ORDER_ITEMS = 100


def _display(value: float) -> str:
    return f"{value:g}"


class OrderStatus(IntEnum):
    """Where an order is in its life."""

    PENDING = 0
    SHIPPED = 1
    DELIVERED = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Order:
    """A client's purchase of product quantities."""

    id: int
    client_egn: str = ""
    items: list[tuple[int, int]] = field(default_factory=list)
    total: float = 0.0
    points: int = 0
    status: OrderStatus = OrderStatus.PENDING

    def add_item(self, product_id: int, quantity: int) -> None:
        """Append a product line to the order."""
        if len(self.items) >= MAX_ORDER_ITEMS:
            raise ValueError("Order cannot hold more items.")
        self.items.append((product_id, quantity))

    def save_lines(self) -> list[str]:
        """Return the header record followed by one record per item."""
        header = ":".join(
            [
                str(self.id),
                self.client_egn,
                str(len(self.items)),
                format_float(self.total),
                str(self.points),
                str(int(self.status)),
            ]
        )
        return [header] + [
            f"{self.id}:{product_id}:{quantity}" for product_id, quantity in self.items
        ]

    def summary(self) -> str:
        """Return a one-line description of the order."""
        return f"Order total: {_display(self.total)} BGN | Status: {self.status.label}"

    def details(self) -> str:
        """Return a multi-line description of the order."""
        lines = ["Order details:"]
        lines += [
            f"- Product ID: {product_id}, Quantity: {quantity}"
            for product_id, quantity in self.items
        ]
        lines += [
            f"Total: {_display(self.total)} BGN",
            f"Loyalty Points: {self.points}",
            f"Status: {self.status.label}",
        ]
        return "\n".join(lines)


def latest_order_id(path: PathLike) -> int:
    """Return the id stored at the start of the orders file (0 if none)."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split(maxsplit=1)
    if not tokens:
        return 0
    try:
        return parse_int(tokens[0])
    except ValueError:
        return 0