"""Shared fixtures."""

import pytest

from family_finance.config import get_settings
from family_finance.provider import FamilyDataProvider
from family_finance.services.storage import InMemoryNameStore


@pytest.fixture
def store():
    """An empty in-memory name store."""
    return InMemoryNameStore()


@pytest.fixture
def provider(store):
    """A provider reading names from the in-memory store."""
    return FamilyDataProvider(store=store)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure no test sees settings cached by another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
