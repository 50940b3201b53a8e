"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every non-root endpoint returns JSON; failures use {"error": message}

Design Decisions:
    - Thin routes delegate validation and arithmetic to core/
"""
