"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's .env overrides
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "json")
