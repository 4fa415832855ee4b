"""Domain entities for the cinema catalog.

Entities are immutable and accept their attributes as given.
Every construction gets a fresh identifier unless one is passed in.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Self
from uuid import uuid4

from catalog.domain.value_objects import CinemaId, IdFactory, MovieId


@dataclass(frozen=True)
class Cinema:
    """Domain representation of a Cinema venue."""

    name: str
    address: str
    id: CinemaId = field(default_factory=CinemaId.generate, kw_only=True)

    @classmethod
    def create(cls, name: str, address: str, *, id_factory: IdFactory = uuid4) -> Self:
        return cls(name=name, address=address, id=CinemaId.generate(id_factory))


@dataclass(frozen=True)
class Movie:
    """Domain representation of a Movie catalog record.

    ``duration`` is the runtime in minutes.
    """

    title: str
    description: str
    duration: int
    release_date: date
    genre: str
    id: MovieId = field(default_factory=MovieId.generate, kw_only=True)

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        duration: int,
        release_date: date,
        genre: str,
        *,
        id_factory: IdFactory = uuid4,
    ) -> Self:
        return cls(
            title=title,
            description=description,
            duration=duration,
            release_date=release_date,
            genre=genre,
            id=MovieId.generate(id_factory),
        )
