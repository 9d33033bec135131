"""Root conftest — shared test configuration."""

import os

# Never point tests at a real database or registry data file
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.pop("REGISTRY_DATA_PATH", None)
os.environ.setdefault("LOG_FORMAT", "text")
