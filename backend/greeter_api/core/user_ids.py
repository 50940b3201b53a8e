"""User Ids — number-like validation and leading-integer parsing of path segments.

Invariants:
    - is_number_like() accepts whatever coerces to a number: whitespace-padded
      decimals, exponents, signed Infinity, 0x/0o/0b literals, and blank strings
    - parse_leading_int() reads sign, 0x prefix or decimal digits, stops at the
      first non-digit, and returns None when nothing was read
    - The parsed value is a double truncated to int; digit runs past the double
      range give None, as does an empty read
    - build_user_view() echoes the original segment in name, never the parsed int
"""

import math
import re

from greeter_api.core.calculator import to_double
from greeter_api.core.domain_types import UserId
from greeter_api.core.errors import InvalidUserIdError

_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
)
_INFINITY_LITERAL = re.compile(r"[+-]?Infinity")
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_LEADING_INT = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))")


def is_number_like(raw: str) -> bool:
    """True when the whole string, trimmed, coerces to a number."""
    text = raw.strip()
    if not text:
        return True
    return any(
        pattern.fullmatch(text)
        for pattern in (_DECIMAL_LITERAL, _INFINITY_LITERAL, _RADIX_LITERAL)
    )


def parse_leading_int(raw: str) -> int | None:
    """Parse the leading integer of a string ("12.9" -> 12, "0x1A" -> 26)."""
    match = _LEADING_INT.match(raw.lstrip())
    if not match:
        return None
    sign, hex_digits, dec_digits = match.groups()
    value = to_double(int(hex_digits, 16)) if hex_digits else float(dec_digits)
    if math.isinf(value):
        return None
    return -int(value) if sign == "-" else int(value)


def build_user_view(raw_id: str) -> dict:
    """Validate a raw user id and synthesize its view."""
    if not is_number_like(raw_id):
        raise InvalidUserIdError(raw_id)
    parsed = parse_leading_int(raw_id)
    return {
        "id": UserId(parsed) if parsed is not None else None,
        "name": f"User{raw_id}",
    }
