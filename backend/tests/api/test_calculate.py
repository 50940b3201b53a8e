"""Calculate Route — verifies POST /calculate results, check order, and messages.

Invariants:
    - Four operations return exact double-precision results
    - Presence check runs before type check, type check before operation check
    - Every failure is a 400 with the exact contract message
"""

import pytest

MISSING = {"error": "Missing required fields: a, b, operation"}
NOT_NUMBERS = {"error": "a and b must be numbers"}
INVALID_OPERATION = {
    "error": "Invalid operation. Use: add, subtract, multiply, divide",
}


# --- Successful operations ---------------------------------------------------

@pytest.mark.parametrize("a, b, operation, expected", [
    (5, 3, "add", 8),
    (10, 4, "subtract", 6),
    (6, 7, "multiply", 42),
    (20, 5, "divide", 4),
    (1, 4, "divide", 0.25),
    (0.1, 0.2, "add", 0.30000000000000004),
])
async def test_operations(client, a, b, operation, expected):
    res = await client.post(
        "/calculate", json={"a": a, "b": b, "operation": operation},
    )
    assert res.status_code == 200
    assert res.json() == {"result": expected}


async def test_integral_division_serializes_as_integer(client):
    res = await client.post(
        "/calculate", json={"a": 20, "b": 5, "operation": "divide"},
    )
    assert res.text.replace(" ", "") == '{"result":4}'


async def test_zero_operands_are_present(client):
    res = await client.post(
        "/calculate", json={"a": 0, "b": 0, "operation": "add"},
    )
    assert res.status_code == 200
    assert res.json() == {"result": 0}


async def test_overflow_result_is_null(client):
    res = await client.post(
        "/calculate", json={"a": 1e308, "b": 10, "operation": "multiply"},
    )
    assert res.status_code == 200
    assert res.json() == {"result": None}


# --- Division by zero ----------------------------------------------------------

@pytest.mark.parametrize("a", [10, 0, -3.5])
async def test_divide_by_zero_returns_400(client, a):
    res = await client.post(
        "/calculate", json={"a": a, "b": 0, "operation": "divide"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Cannot divide by zero"}


# --- Missing fields --------------------------------------------------------------

@pytest.mark.parametrize("body", [
    {"b": 3, "operation": "add"},
    {"a": 5, "operation": "add"},
    {"a": 5, "b": 3},
    {"a": 5, "b": 3, "operation": ""},
    {"a": 5, "b": 3, "operation": None},
    {"a": 5, "b": 3, "operation": 0},
    {},
])
async def test_missing_fields_returns_400(client, body):
    res = await client.post("/calculate", json=body)
    assert res.status_code == 400
    assert res.json() == MISSING


async def test_non_object_body_counts_as_missing_fields(client):
    res = await client.post("/calculate", json=[5, 3, "add"])
    assert res.status_code == 400
    assert res.json() == MISSING


async def test_non_json_body_counts_as_missing_fields(client):
    res = await client.post(
        "/calculate", content="a=5&b=3&operation=add",
        headers={"content-type": "application/x-www-form-urlencoded"},
    )
    assert res.status_code == 400
    assert res.json() == MISSING


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/calculate", content='{"a": 5,',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Malformed JSON body"}


# --- Operand types ---------------------------------------------------------------

@pytest.mark.parametrize("body", [
    {"a": "five", "b": 3, "operation": "add"},
    {"a": 5, "b": "three", "operation": "add"},
    {"a": None, "b": 3, "operation": "add"},
    {"a": True, "b": 3, "operation": "add"},
    {"a": [5], "b": 3, "operation": "add"},
])
async def test_non_numeric_operands_return_400(client, body):
    res = await client.post("/calculate", json=body)
    assert res.status_code == 400
    assert res.json() == NOT_NUMBERS


async def test_type_check_precedes_operation_check(client):
    res = await client.post(
        "/calculate", json={"a": "5", "b": 3, "operation": "modulo"},
    )
    assert res.status_code == 400
    assert res.json() == NOT_NUMBERS


# --- Operation ---------------------------------------------------------------------

@pytest.mark.parametrize("operation", ["modulo", "ADD", 1, ["add"]])
async def test_invalid_operation_returns_400(client, operation):
    res = await client.post(
        "/calculate", json={"a": 5, "b": 3, "operation": operation},
    )
    assert res.status_code == 400
    assert res.json() == INVALID_OPERATION


async def test_integer_beyond_double_range_parses_as_infinite(client):
    res = await client.post(
        "/calculate", content='{"a": ' + "1" * 5000 + ', "b": 1, "operation": "add"}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json() == {"result": None}


async def test_large_integers_use_double_precision(client):
    res = await client.post(
        "/calculate", content='{"a": 9007199254740993, "b": 0, "operation": "add"}',
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json() == {"result": 9007199254740992}
