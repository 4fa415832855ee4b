"""Entity factory - the single place catalog entities get their identity.

The factory:
- Owns the identifier-generation capability (injected, never ambient)
- Builds Cinema and Movie entities
- Parses identifiers from untrusted text and maps failures to domain errors
"""

import logging
from datetime import date

from catalog.domain.errors import InvalidCinemaIdError, InvalidMovieIdError
from catalog.domain.models import Cinema, Movie
from catalog.domain.value_objects import CinemaId, IdFactory, MovieId

logger = logging.getLogger(__name__)


class EntityFactory:
    """Factory for catalog entities."""

    def __init__(self, id_factory: IdFactory) -> None:
        self._id_factory = id_factory

    def create_cinema(self, name: str, address: str) -> Cinema:
        """Return a new cinema with a freshly generated ID."""
        cinema = Cinema.create(name, address, id_factory=self._id_factory)
        logger.debug("Created cinema %s (%r)", cinema.id, cinema.name)
        return cinema

    def create_movie(
        self,
        title: str,
        description: str,
        duration: int,
        release_date: date,
        genre: str,
    ) -> Movie:
        """Return a new movie with a freshly generated ID."""
        movie = Movie.create(
            title,
            description,
            duration,
            release_date,
            genre,
            id_factory=self._id_factory,
        )
        logger.debug("Created movie %s (%r)", movie.id, movie.title)
        return movie

    def parse_cinema_id(self, value: str) -> CinemaId:
        """Parse a cinema ID.

        Raises:
            InvalidCinemaIdError: If the value is not a valid UUID.
        """
        try:
            return CinemaId.from_string(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Rejected cinema id %r", value)
            raise InvalidCinemaIdError(value) from exc

    def parse_movie_id(self, value: str) -> MovieId:
        """Parse a movie ID.

        Raises:
            InvalidMovieIdError: If the value is not a valid UUID.
        """
        try:
            return MovieId.from_string(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Rejected movie id %r", value)
            raise InvalidMovieIdError(value) from exc
