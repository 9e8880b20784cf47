"""Cheques that admins issue and clients redeem."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from .textutil import format_float, parse_int, split_fields

__all__ = [
    "CODE_LENGTH",
    "EGN_LENGTH",
    "ChequeError",
    "Cheque",
    "latest_cheque_id",
    "cheque_code_exists",
]

PathLike = Union[str, "os.PathLike[str]"]

CODE_LENGTH = 5
EGN_LENGTH = 11


class ChequeError(Exception):
    """Raised when a cheque cannot be redeemed."""


@dataclass
class Cheque:
    """A money cheque identified by a code and bound to a client."""

    id: int
    code: str
    client_egn: str
    amount: float
    used: bool = False

    def redeem(self, code: str, client_egn: str, cheques_path: PathLike) -> None:
        """Mark the cheque as used if the code is known or the client matches."""
        if self.used:
            raise ChequeError("Code already used!")
        if cheque_code_exists(cheques_path, code) or self.is_authorized(client_egn):
            self.used = True
            return
        raise ChequeError("Code or information about the cheque is incorrect!")

    def is_authorized(self, client_egn: str) -> bool:
        """Return whether the cheque belongs to ``client_egn``."""
        return self.client_egn == client_egn

    def save_data(self) -> str:
        """Return the cheque as one colon-separated record."""
        return ":".join(
            [str(self.id), self.code, format_float(self.amount), str(int(self.used))]
        )


def latest_cheque_id(path: PathLike) -> int:
    """Return the id stored at the start of the cheques file (0 if none)."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split(maxsplit=1)
    if not tokens:
        return 0
    try:
        return parse_int(tokens[0])
    except ValueError:
        return 0


def cheque_code_exists(path: PathLike, code: str) -> bool:
    """Return whether a cheque with ``code`` is recorded in the cheques file."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    try:
        count = parse_int(tokens[1])
    except (IndexError, ValueError):
        return False
    for record in tokens[2 : 2 + max(count, 0)]:
        fields = split_fields(record, ":")
        if len(fields) > 1 and fields[1] == code:
            return True
    return False