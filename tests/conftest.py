"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database unless a fixture builds one explicitly
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")
