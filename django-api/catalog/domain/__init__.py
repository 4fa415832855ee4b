from catalog.domain.models import Cinema, Movie
from catalog.domain.value_objects import CinemaId, IdFactory, MovieId

__all__ = [
    "Cinema",
    "Movie",
    "CinemaId",
    "MovieId",
    "IdFactory",
]
