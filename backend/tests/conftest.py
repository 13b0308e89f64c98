"""Root conftest — shared test configuration."""

import os

# Must be set before bizcard.config.get_settings() is first called
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ID_CODEC_SECRET", "test-secret")
os.environ.setdefault("ID_CODEC_SCHEME", "hashids")
