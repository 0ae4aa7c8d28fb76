import pytest

from volunteer_log import EntryStore


@pytest.fixture
def data_dir(tmp_path):
    """A not-yet-existing data directory, so the store has to create it."""
    return tmp_path / "app-data"


@pytest.fixture
def store(data_dir):
    """A fresh EntryStore per test."""
    return EntryStore(data_dir)
