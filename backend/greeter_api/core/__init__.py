"""Core Layer — pure validation and arithmetic, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - Failures are raised as GreeterError subclasses, never returned
"""
