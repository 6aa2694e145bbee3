"""
Pytest fixtures for dealersite tests.
"""

import pytest
import tempfile
from pathlib import Path

from dealersite.config import MemoryStorage, SQLiteStorage, SiteConfigStore
from dealersite.settings import DealerSiteSettings


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test_site_config.db"


@pytest.fixture
def settings(temp_db_path):
    """Create test settings."""
    return DealerSiteSettings(db_path=temp_db_path)


@pytest.fixture
def memory_storage():
    """Fresh in-memory storage for each test."""
    return MemoryStorage()


@pytest.fixture
def sqlite_storage(temp_db_path):
    """SQLite storage in a temporary directory."""
    storage = SQLiteStorage(temp_db_path)
    yield storage
    storage.close()


@pytest.fixture
def store(memory_storage):
    """Config store for a sample dealer."""
    return SiteConfigStore(memory_storage, slug="acme-motors")
