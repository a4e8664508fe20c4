"""
Pytest configuration and fixtures for quadnav tests.
"""

from __future__ import annotations

import pytest

from quadnav.core.config import Settings
from quadnav.graph.store import MemoryQuadStore
from tests.fakes import build_list_quads, build_people_quads


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with a small list bound."""
    return Settings(
        service_name="quadnav-test",
        log_level="DEBUG",
        log_file_path=None,
        max_list_length=50,
    )


@pytest.fixture
def people_store() -> MemoryQuadStore:
    """Fresh store with the sample people (safe to mutate per test)."""
    return MemoryQuadStore(build_people_quads())


@pytest.fixture
def list_store() -> MemoryQuadStore:
    """Store holding one three-item list ("1", "2", "3") under ex:list."""
    return MemoryQuadStore(build_list_quads())
