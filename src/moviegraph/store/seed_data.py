"""
Seed data for the record store.

The built-in seed is used unless a JSON seed file is configured. A seed file
has the shape::

    {
        "actors": [{"id": 1, "name": "Actor A"}],
        "movies": [{"id": 1, "name": "Movie A", "actorId": 1}]
    }

``actor_id`` is accepted in place of ``actorId``.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..logging import get_logger

logger = get_logger(__name__)


class SeedDataError(Exception):
    """Raised when seed data cannot be read or fails validation."""


class ActorSeed(BaseModel):
    id: int
    name: str = Field(min_length=1)


class MovieSeed(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(min_length=1)
    actor_id: int = Field(alias="actorId")


class SeedData(BaseModel):
    actors: list[ActorSeed] = []
    movies: list[MovieSeed] = []

    def dangling_movies(self) -> list[MovieSeed]:
        """Movies whose actor_id matches no seeded actor."""
        actor_ids = {actor.id for actor in self.actors}
        return [movie for movie in self.movies if movie.actor_id not in actor_ids]


def default_seed() -> SeedData:
    """Return the built-in seed."""
    return SeedData(
        actors=[
            ActorSeed(id=1, name="Actor A"),
            ActorSeed(id=2, name="Actor B"),
            ActorSeed(id=3, name="Actor C"),
        ],
        movies=[
            MovieSeed(id=1, name="Movie A", actor_id=1),
            MovieSeed(id=2, name="Movie B", actor_id=2),
            MovieSeed(id=3, name="Movie C", actor_id=2),
        ],
    )


def load_seed_file(path: str | Path) -> SeedData:
    """Load and validate a JSON seed file.

    Raises:
        SeedDataError: If the file is missing, is not valid JSON, or does not
            match the seed shape.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedDataError(f"Cannot read seed file {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed file {path} is not valid JSON: {e}") from e

    try:
        seed = SeedData.model_validate(payload)
    except ValidationError as e:
        raise SeedDataError(f"Seed file {path} is invalid: {e}") from e

    dangling = seed.dangling_movies()
    if dangling:
        # Tolerated: these movies resolve a null actor.
        logger.warning(
            "Seed movies reference unknown actors",
            path=str(path),
            movie_ids=[movie.id for movie in dangling],
        )

    logger.info(
        "Seed file loaded",
        path=str(path),
        actors=len(seed.actors),
        movies=len(seed.movies),
    )
    return seed


def load_seed(path: str | Path | None = None) -> SeedData:
    """Load the seed from ``path`` if given, else the built-in seed."""
    if path is None:
        return default_seed()
    return load_seed_file(path)
