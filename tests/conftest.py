"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from account_store.service import AccountService
from account_store.store import PositionalRecordStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path for a data file that does not exist yet."""
    return tmp_path / "accounts.dat"


@pytest.fixture
def store(data_file: Path) -> PositionalRecordStore:
    """Initialized store with 100 empty slots."""
    store = PositionalRecordStore(data_file)
    store.initialize()
    return store


@pytest.fixture
def service(store: PositionalRecordStore) -> AccountService:
    """Service over a freshly initialized store."""
    return AccountService(store)
