"""Error Hierarchy — typed, categorized exceptions for every client-facing failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), and HTTP status
    - to_response() always produces the flat envelope {"error": message}
    - Messages are part of the public contract and must not be reworded

Design Decisions:
    - Single hierarchy with GreeterError base: one global handler catches all
    - One subclass per contract message, so call sites never spell a message twice
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class GreeterError(Exception):
    """Base exception for all Greeter API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Validation Errors (400) ────────────────────────────────────

class MissingNameError(GreeterError):
    """GET /greet without a usable name parameter."""
    def __init__(self):
        super().__init__(
            "Name parameter is required",
            "NAME_REQUIRED", ErrorCategory.VALIDATION,
        )


class InvalidUserIdError(GreeterError):
    """User id path segment is not number-like."""
    def __init__(self, raw_id: str):
        super().__init__(
            "User ID must be a number",
            "INVALID_USER_ID", ErrorCategory.VALIDATION,
        )
        self.raw_id = raw_id


class MissingFieldsError(GreeterError):
    """Calculation body lacks a, b, or a truthy operation."""
    def __init__(self):
        super().__init__(
            "Missing required fields: a, b, operation",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
        )


class NonNumericOperandsError(GreeterError):
    """Operand a or b is present but not a JSON number."""
    def __init__(self):
        super().__init__(
            "a and b must be numbers",
            "NON_NUMERIC_OPERANDS", ErrorCategory.VALIDATION,
        )


class MalformedBodyError(GreeterError):
    """Request body declared as JSON could not be parsed."""
    def __init__(self):
        super().__init__(
            "Malformed JSON body",
            "MALFORMED_BODY", ErrorCategory.VALIDATION,
        )


# ─── Business Rule Errors (400) ─────────────────────────────────

class DivisionByZeroError(GreeterError):
    """divide requested with b == 0."""
    def __init__(self):
        super().__init__(
            "Cannot divide by zero",
            "DIVISION_BY_ZERO", ErrorCategory.BUSINESS_RULE,
        )


class InvalidOperationError(GreeterError):
    """Operation is not one of the supported four."""
    def __init__(self, operation: object):
        super().__init__(
            "Invalid operation. Use: add, subtract, multiply, divide",
            "INVALID_OPERATION", ErrorCategory.BUSINESS_RULE,
        )
        self.operation = operation


# ─── Routing Errors (404) ───────────────────────────────────────

class RouteNotFoundError(GreeterError):
    """No route matches the request method and path."""
    def __init__(self, method: str = "", path: str = ""):
        super().__init__(
            "Route not found",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.method = method
        self.path = path
