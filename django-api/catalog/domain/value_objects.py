"""Identifier primitives for catalog entities."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

IdFactory = Callable[[], UUID]


@dataclass(frozen=True)
class CinemaId:
    """Unique identifier for a Cinema."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls, id_factory: IdFactory = uuid4) -> Self:
        return cls(value=id_factory())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MovieId:
    """Unique identifier for a Movie."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls, id_factory: IdFactory = uuid4) -> Self:
        return cls(value=id_factory())

    def __str__(self) -> str:
        return str(self.value)
