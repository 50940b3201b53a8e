"""Infrastructure Layer — cross-cutting concerns outside the request path.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
