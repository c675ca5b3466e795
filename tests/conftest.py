"""Shared fixtures for Shop Ledger tests."""

import pytest

from shopledger.services.storage import InMemoryKeyValueStore
from shopledger.store import LedgerStore
from tests.factories import NOW


@pytest.fixture
def clock():
    """A clock frozen at NOW."""
    return lambda: NOW


@pytest.fixture
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture
def ledger(kv_store, clock):
    """Ledger loaded from empty storage, i.e. the seed dataset."""
    return LedgerStore.load(kv_store, clock)
