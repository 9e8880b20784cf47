"""Refund requests for orders."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from .textutil import parse_int

__all__ = ["Refund", "latest_refund_id"]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Refund:
    """A request to refund an order, approved or not."""

    id: int
    order_id: int = -1
    approved: bool = False

    def save_data(self) -> str:
        """Return the refund as one colon-separated record."""
        return f"{self.id}:{self.order_id}:{int(self.approved)}"


def latest_refund_id(path: PathLike) -> int:
    """Return the id stored at the start of the refunds file (0 if none)."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split(maxsplit=1)
    if not tokens:
        return 0
    try:
        return parse_int(tokens[0])
    except ValueError:
        return 0