"""Locations of the shop's data files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

__all__ = ["DataPaths", "data_paths"]


@dataclass(frozen=True)
class DataPaths:
    """Paths of every data file the shop reads and writes."""

    products: Path
    carts: Path
    transactions: Path
    users: Path
    cheques: Path
    last_logged: Path
    orders: Path
    refunds: Path


def data_paths(directory: Union[str, "os.PathLike[str]"] = "data") -> DataPaths:
    """Return the data file paths inside ``directory``."""
    base = Path(directory)
    return DataPaths(
        products=base / "Products.txt",
        carts=base / "Carts.txt",
        transactions=base / "Transactions.txt",
        users=base / "Users.txt",
        cheques=base / "Cheques.txt",
        last_logged=base / "LastData.txt",
        orders=base / "Orders.txt",
        refunds=base / "Refunds.txt",
    )