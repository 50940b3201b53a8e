"""Calculator — validates a raw calculation body and evaluates it in double precision.

Invariants:
    - Checks run in a fixed order: presence, operand types, operation, division by zero
    - Presence of a/b means "key exists"; null and 0 are present values
    - operation is missing when absent or falsy (null, false, "", 0)
    - Operands are JSON numbers only; bool is never numeric
    - Arithmetic is IEEE-754 double; integral results are returned as int,
      non-finite results as None (serialized to JSON null)
"""

import math
from typing import Any, Callable

from greeter_api.core.domain_types import Number, Operation
from greeter_api.core.errors import (
    DivisionByZeroError,
    InvalidOperationError,
    MissingFieldsError,
    NonNumericOperandsError,
)

# Doubles at or above this magnitude stop printing as plain integers in JSON
_INTEGRAL_OUTPUT_LIMIT = 1e21

_OPERATIONS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: lambda a, b: a + b,
    Operation.SUBTRACT: lambda a, b: a - b,
    Operation.MULTIPLY: lambda a, b: a * b,
    Operation.DIVIDE: lambda a, b: a / b,
}


def is_number(value: Any) -> bool:
    """True for JSON numbers. bool is an int subclass and is excluded."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_falsy(value: Any) -> bool:
    """JSON-value falsiness: null, false, empty string, and zero.

    Empty arrays and objects are truthy, unlike Python's default.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if is_number(value):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def to_double(value: Number) -> float:
    """Coerce a JSON number to float, saturating ints too large for a double."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def normalize_result(value: float) -> Number | None:
    """Render a double the way it reads as JSON: 4.0 -> 4, inf/nan -> None."""
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < _INTEGRAL_OUTPUT_LIMIT:
        return int(value)
    return value


def validate_body(body: Any) -> tuple[Number, Number, Any]:
    """Extract (a, b, operation) from a parsed body, raising on missing or non-numeric fields.

    A body that is not a JSON object is treated as an empty object.
    """
    fields = body if isinstance(body, dict) else {}
    if "a" not in fields or "b" not in fields or is_falsy(fields.get("operation")):
        raise MissingFieldsError()
    a, b = fields["a"], fields["b"]
    if not is_number(a) or not is_number(b):
        raise NonNumericOperandsError()
    return a, b, fields["operation"]


def resolve_operation(operation: Any) -> Operation:
    """Map the raw operation value to an Operation. Only exact strings match."""
    if not isinstance(operation, str):
        raise InvalidOperationError(operation)
    try:
        return Operation(operation)
    except ValueError:
        raise InvalidOperationError(operation) from None


def calculate(a: Number, b: Number, operation: Operation) -> Number | None:
    """Apply operation to a and b in double precision."""
    if operation is Operation.DIVIDE and b == 0:
        raise DivisionByZeroError()
    result = _OPERATIONS[operation](to_double(a), to_double(b))
    return normalize_result(result)


def evaluate(body: Any) -> Number | None:
    """Validate a raw calculation body and return its result."""
    a, b, raw_operation = validate_body(body)
    return calculate(a, b, resolve_operation(raw_operation))
