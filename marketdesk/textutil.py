"""Field splitting, strict number parsing and fixed-point formatting."""

from __future__ import annotations

import math

__all__ = [
    "split_fields",
    "parse_int",
    "parse_float",
    "format_float",
    "str_equal",
    "starts_with",
]


def split_fields(text: str, delimiter: str) -> list[str]:
    """Split a record into its fields; empty fields are kept."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return text.split(delimiter)


def parse_int(text: str) -> int:
    """Parse an optionally signed run of decimal digits.

    Only ``+`` or ``-`` followed by ASCII digits is accepted; anything else
    raises ``ValueError``.
    """
    sign = 1
    digits = text
    if digits[:1] in ("-", "+"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if not digits:
        raise ValueError(f"not an integer: {text!r}")
    if any(ch not in "0123456789" for ch in digits):
        raise ValueError(f"not an integer: {text!r}")
    return sign * int(digits)


def parse_float(text: str) -> float:
    """Parse an optional ``-``, digits and at most one decimal point.

    At least one digit is required. Exponents, ``+`` signs and whitespace
    are rejected with ``ValueError``.
    """
    body = text[1:] if text.startswith("-") else text
    negative = body is not text
    whole, dot, fraction = body.partition(".")
    if "." in fraction:
        raise ValueError(f"more than one decimal point: {text!r}")
    for part in (whole, fraction):
        if any(ch not in "0123456789" for ch in part):
            raise ValueError(f"not a number: {text!r}")
    if not whole and not fraction:
        raise ValueError(f"not a number: {text!r}")

    result = 0.0
    for ch in whole:
        result = result * 10.0 + int(ch)
    frac_value = 0.0
    divisor = 10.0
    for ch in fraction:
        frac_value += int(ch) / divisor
        divisor *= 10.0
    value = result + frac_value
    return -value if negative else value


def format_float(value: float, precision: int = 2) -> str:
    """Format ``value`` with a fixed number of decimals, truncating.

    The decimal point is always written, even when ``precision`` is zero.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value: {value!r}")
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
    int_part = int(value)
    frac_part = value - int_part
    digits = []
    for _ in range(precision):
        frac_part *= 10
        digit = int(frac_part)
        digits.append(str(digit))
        frac_part -= digit
    return f"{sign}{int_part}.{''.join(digits)}"


def str_equal(a: str, b: str) -> bool:
    """Return whether two strings are identical."""
    return a == b


def starts_with(text: str, prefix: str) -> bool:
    """Return whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)