"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.registry_directory.cache import CacheWriteOutcome  # noqa: E402
from src.registry_directory.errors import CacheUnavailable, CacheWriteRejected  # noqa: E402
from src.registry_directory.models import Organization  # noqa: E402


class InMemoryCacheStore:
    """
    Stand-in for CacheStore keeping the serialized dataset in memory.

    The failure switches mimic an unreachable backend and an out-of-memory
    backend.
    """

    def __init__(self):
        self.payload = None
        self.fail_get = False
        self.fail_set = False
        self.reject_writes = False
        self.get_calls = 0
        self.set_calls = 0

    def get(self):
        self.get_calls += 1
        if self.fail_get:
            raise CacheUnavailable("connection refused")
        if self.payload is None:
            return None
        return [Organization.from_dict(record) for record in json.loads(self.payload)]

    def set(self, dataset):
        self.set_calls += 1
        if self.fail_set:
            raise CacheUnavailable("connection refused")
        if self.reject_writes:
            return CacheWriteOutcome(
                stored=False,
                rejection=CacheWriteRejected("OOM command not allowed")
            )
        self.payload = json.dumps([org.to_dict() for org in dataset])
        return CacheWriteOutcome(stored=True)


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def registry_objects(fixtures_dir):
    """Load raw registry objects from fixtures."""
    data_file = fixtures_dir / "registry_objects.json"
    with open(data_file, encoding="utf-8") as f:
        return json.load(f)["Objects"]


@pytest.fixture
def cache_store():
    """Empty in-memory cache store."""
    return InMemoryCacheStore()


@pytest.fixture
def make_organizations():
    """Factory building count simple organizations with sequential BINs."""
    def _make(count, status="Active"):
        return [
            Organization(
                bin=f"{index:012d}",
                name_parts=["Ministry", f"Department {index}"],
                status=status,
            )
            for index in range(count)
        ]

    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring registry/Redis access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
