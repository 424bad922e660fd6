"""Shared fixtures: ledgers on a temporary directory with a controllable clock."""

from pathlib import Path

import pytest

from src.core.data_store import DataStore
from src.core.ledger import Ledger
from src.core.storage import FileKeyValueStore
from tests.factories import MONDAY, FakeClock, sequential_ids


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def storage(data_dir: Path) -> FileKeyValueStore:
    return FileKeyValueStore(data_dir)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(MONDAY)


@pytest.fixture
def ledger(storage: FileKeyValueStore, clock: FakeClock) -> Ledger:
    store = DataStore(storage)
    store.load()
    ids = sequential_ids()
    return Ledger(store, clock=clock, id_factory=lambda: next(ids))
