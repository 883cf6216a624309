"""
In-memory record store for movies and actors
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..logging import get_logger
from .models import Actor, Movie

if TYPE_CHECKING:
    from .seed_data import SeedData

logger = get_logger(__name__)


class RecordStore:
    """Owns the movie and actor collections.

    Both collections keep insertion order. Reads return copies so callers never
    hold the live lists, and ``add_movie`` is the only mutation entry point.
    A single lock makes the count-then-append in ``add_movie`` atomic.
    """

    def __init__(
        self,
        actors: Iterable[Actor] = (),
        movies: Iterable[Movie] = (),
    ) -> None:
        self._actors: list[Actor] = list(actors)
        self._movies: list[Movie] = list(movies)
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, seed: SeedData) -> RecordStore:
        """Build a store populated from validated seed data."""
        return cls(
            actors=[Actor(id=a.id, name=a.name) for a in seed.actors],
            movies=[Movie(id=m.id, name=m.name, actor_id=m.actor_id) for m in seed.movies],
        )

    @property
    def movie_count(self) -> int:
        with self._lock:
            return len(self._movies)

    @property
    def actor_count(self) -> int:
        with self._lock:
            return len(self._actors)

    def find_movie_by_id(self, id: int) -> Movie | None:
        """Return the first movie with the given id, or None."""
        for movie in self.list_movies():
            if movie.id == id:
                return movie
        return None

    def find_actor_by_id(self, id: int) -> Actor | None:
        """Return the first actor with the given id, or None."""
        for actor in self.list_actors():
            if actor.id == id:
                return actor
        return None

    def list_movies(self) -> list[Movie]:
        with self._lock:
            return list(self._movies)

    def list_actors(self) -> list[Actor]:
        with self._lock:
            return list(self._actors)

    def add_movie(self, name: str, actor_id: int) -> Movie:
        """Append a new movie and return it.

        The id is the movie count before the append plus one. ``actor_id`` is
        not checked against the actor collection.
        """
        with self._lock:
            movie = Movie(id=len(self._movies) + 1, name=name, actor_id=actor_id)
            self._movies.append(movie)

        logger.info("Movie added", movie_id=movie.id, name=name, actor_id=actor_id)
        return movie
