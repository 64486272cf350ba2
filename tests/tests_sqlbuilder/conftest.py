"""
Shared fixtures for sqlbuilder tests.

Key fixtures:
- now: fixed timestamp for audit columns
- sample_model: duck-typed entity exposing id, published and updated
"""

from datetime import datetime
from types import SimpleNamespace

import pytest


@pytest.fixture
def now():
    """Fixed timestamp so expected parameters are deterministic."""
    return datetime(2024, 5, 17, 9, 30, 0)


@pytest.fixture
def sample_model(now):
    """
    Entity with the fields the entity adapter reads.
    """
    return SimpleNamespace(id=456, published=now, updated=now,
                           firstName="Bam Bam", lastName="Rubble", points=321)
