from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import Actor as ActorRecord
from ..context import get_loaders, get_store

if TYPE_CHECKING:
    from ..types.actor import Actor
    from ..types.movie import Movie

logger = get_logger(__name__)


def to_actor_type(record: ActorRecord) -> Actor:
    """Convert a store record to the GraphQL Actor type."""
    from ..types.actor import Actor as ActorType

    return ActorType(id=record.id, name=record.name)


async def resolve_actor_by_id(info: strawberry.Info, id: int | None) -> Actor | None:
    """Resolve an actor by its ID, or None if no actor has that ID."""
    if id is None:
        return None

    record = get_store(info).find_actor_by_id(id)
    if record is None:
        logger.info("Actor not found", actor_id=id)
        return None

    return to_actor_type(record)


async def resolve_actors(info: strawberry.Info) -> list[Actor]:
    return [to_actor_type(record) for record in get_store(info).list_actors()]


async def resolve_actor_movies(actor: Actor, info: strawberry.Info) -> list[Movie]:
    """Resolve the movies of an actor, in insertion order."""
    from .movie import to_movie_type

    records = await get_loaders(info).movies_by_actor_loader.load(actor.id)
    return [to_movie_type(record) for record in records]
