"""Greeter API Package — demonstration HTTP JSON endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
