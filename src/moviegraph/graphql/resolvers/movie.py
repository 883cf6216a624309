from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import Movie as MovieRecord
from ..context import get_loaders, get_store

if TYPE_CHECKING:
    from ..types.actor import Actor
    from ..types.movie import Movie

logger = get_logger(__name__)


def to_movie_type(record: MovieRecord) -> Movie:
    """Convert a store record to the GraphQL Movie type."""
    from ..types.movie import Movie as MovieType

    return MovieType(id=record.id, name=record.name, actor_id=record.actor_id)


# Query resolvers
async def resolve_movie_by_id(info: strawberry.Info, id: int | None) -> Movie | None:
    """Resolve a movie by its ID, or None if no movie has that ID."""
    if id is None:
        return None

    record = get_store(info).find_movie_by_id(id)
    if record is None:
        logger.info("Movie not found", movie_id=id)
        return None

    return to_movie_type(record)


async def resolve_movies(info: strawberry.Info) -> list[Movie]:
    return [to_movie_type(record) for record in get_store(info).list_movies()]


# Field resolvers
async def resolve_movie_actor(movie: Movie, info: strawberry.Info) -> Actor | None:
    """Resolve the actor of a movie; None for a dangling actor_id."""
    from .actor import to_actor_type

    record = await get_loaders(info).actor_loader.load(movie.actor_id)
    if record is None:
        logger.debug("Movie references unknown actor", movie_id=movie.id, actor_id=movie.actor_id)
        return None

    return to_actor_type(record)


# Mutation resolvers
async def add_movie(info: strawberry.Info, name: str, actor_id: int) -> Movie:
    """Append a new movie to the store."""
    record = get_store(info).add_movie(name=name, actor_id=actor_id)
    # The actor's cached movie list no longer matches the store
    get_loaders(info).movies_by_actor_loader.clear(actor_id)
    return to_movie_type(record)
