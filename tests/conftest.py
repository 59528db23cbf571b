"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at an in-memory SQLite database before anything imports settings.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["DB_ENABLED"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-smartbite-suite-0123456789"
os.environ["USDA_API_KEY"] = "test-usda-key"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest  # noqa: E402

from adapters import usda_adapter  # noqa: E402
from domain.models import Base, engine  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts with empty tables and no cached USDA client."""
    Base.metadata.create_all(bind=engine)
    yield
    usda_adapter.set_client(None)
    Base.metadata.drop_all(bind=engine)
