"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from datetime import date
from uuid import UUID

import pytest

from catalog.services import EntityFactory


@pytest.fixture
def sequential_ids() -> Iterator[UUID]:
    return (UUID(int=n) for n in range(1, 1000))


@pytest.fixture
def entity_factory(sequential_ids: Iterator[UUID]) -> EntityFactory:
    return EntityFactory(id_factory=lambda: next(sequential_ids))


@pytest.fixture
def inception_data() -> dict:
    return {
        "title": "Inception",
        "description": "Space movie",
        "duration": 212,
        "release_date": date(2025, 12, 13),
        "genre": "Drama",
    }
