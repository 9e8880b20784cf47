"""Products offered for sale by business users."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Union

from .textutil import format_float, parse_int

__all__ = ["Product", "latest_product_id"]

PathLike = Union[str, "os.PathLike[str]"]


def _display(value: float) -> str:
    return f"{value:g}"


@dataclass
class Product:
    """A product with stock, price and a running average rating."""

    id: int
    name: str
    business_egn: str
    price: float
    quantity: int
    description: str = ""
    rating: float = 0.0
    rating_count: int = 0
    available: bool = field(init=False)

    def __post_init__(self) -> None:
        self.available = self.quantity > 0

    def is_available(self) -> bool:
        """Return whether any stock is left."""
        return self.quantity > 0

    def decrease_quantity(self, amount: int) -> None:
        """Take ``amount`` items out of stock."""
        if not self.is_available():
            raise ValueError("There are no available items of this product!")
        if amount > self.quantity:
            raise ValueError(
                "You are trying to purchase more than there is: "
                f"available - {self.quantity}"
            )
        self.quantity -= amount
        if self.quantity == 0:
            self.available = False

    def increase_quantity(self, amount: int) -> None:
        """Put ``amount`` items back into stock."""
        self.quantity += amount
        if not self.available and self.quantity > 0:
            self.available = True

    def rate(self, stars: int) -> None:
        """Add a rating of 1 to 5 stars; other values are ignored."""
        if 1 <= stars <= 5:
            self.rating = (self.rating * self.rating_count + stars) / (self.rating_count + 1)
            self.rating_count += 1

    def _shown_rating(self) -> float:
        return self.rating if self.rating_count else 0.0

    def save_data(self) -> str:
        """Return the product as one colon-separated record."""
        return ":".join(
            [
                str(self.id),
                self.business_egn,
                self.name,
                format_float(self.price),
                str(self.quantity),
                self.description,
                format_float(self.rating),
                str(self.rating_count),
                str(int(self.available)),
            ]
        )

    def summary(self) -> str:
        """Return a one-line description of the product."""
        return (
            f"{self.id} | {self.name} | {_display(self.price)} BGN | "
            f"{_display(self._shown_rating())} star | {self.quantity} quantity"
        )

    def details(self) -> str:
        """Return a multi-line description of the product."""
        return "\n".join(
            [
                f"ID: {self.id}",
                f"Product Name: {self.name}",
                f"Price: {_display(self.price)} BGN",
                f"Stock: {self.quantity} pcs",
                f"Rating: {_display(self._shown_rating())} stars",
                f"Description: {self.description}",
            ]
        )


def latest_product_id(path: PathLike) -> int:
    """Return the id stored at the start of the products file (0 if none)."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split(maxsplit=1)
    if not tokens:
        return 0
    try:
        return parse_int(tokens[0])
    except ValueError:
        return 0