"""
Shared fixtures: every test gets its own storage directory.
"""

import pytest

from data.repository import DataRepository


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "storage"


@pytest.fixture
def repo(storage_dir):
    """Repository writing into a throwaway directory."""
    return DataRepository(storage_dir)
