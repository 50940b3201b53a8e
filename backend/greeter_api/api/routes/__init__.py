"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to core/)
    - Routes never log; error handlers own logging
    - Every path also matches its single-trailing-slash form (hidden from schema)
"""

# GET routes also answer HEAD
READ_METHODS = ["GET", "HEAD"]
