"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Operation values are the exact wire strings accepted by POST /calculate
    - Number is a JSON number after parsing: int or float, never bool

Design Decisions:
    - str Enum: compares equal to the raw body string and serializes without custom encoders
"""

from enum import Enum
from typing import NewType, Union


# ─── Value Types ─────────────────────────────────────────────────

Number = Union[int, float]
UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """Arithmetic operations supported by the calculator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
