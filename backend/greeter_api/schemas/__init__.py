"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe what leaves the API; request validation lives in core/
    - Field names match the public JSON exactly
"""
