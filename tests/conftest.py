# tests/conftest.py

"""Shared pytest configuration."""

import os

# Settings are read at import time; keep a developer's environment from
# leaking into the defaults the tests assert on.
for _name in ("PORT", "DATABASE_URL", "DATABASE_REQUIRED", "STATIC_DIR", "INDEX_FILE"):
    os.environ.pop(_name, None)
