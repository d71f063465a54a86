"""Root conftest — shared test configuration."""

import os

# Tests never touch a developer database or seed on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
