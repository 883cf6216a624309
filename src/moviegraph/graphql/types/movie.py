"""
Movie GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .actor import Actor


@strawberry.type(description="Represents a single movie with a actor")
class Movie:
    """Movie type for GraphQL API."""

    id: int
    name: str
    actor_id: int

    @strawberry.field
    async def actor(
        self, info: strawberry.Info
    ) -> Annotated["Actor", strawberry.lazy(".actor")] | None:
        """Get the actor of this movie."""
        from ..resolvers.movie import resolve_movie_actor

        return await resolve_movie_actor(self, info)
