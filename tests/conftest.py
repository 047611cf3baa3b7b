"""
Pytest configuration for test suite

Markers:
- unit: Fast unit tests (no external dependencies)
- integration: Integration tests (requires LocalStack)
"""

import pytest

from core.models.upload import DestinationConfig
from tests.fakes import FIXED_NOW, FakeStorageClient


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Fast unit tests (no dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (requires LocalStack)"
    )


@pytest.fixture
def fake_client():
    return FakeStorageClient()


@pytest.fixture
def destination():
    return DestinationConfig(
        directory_prefix="storage",
        path_separator="/",
        domain="https://media.example.com",
        bucket="media",
    )


@pytest.fixture
def clock():
    return lambda: FIXED_NOW
