"""
Actor GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .movie import Movie


@strawberry.type(description="Represents a single actor of a movie")
class Actor:
    """Actor type for GraphQL API."""

    id: int
    name: str

    @strawberry.field
    async def movies(
        self, info: strawberry.Info
    ) -> list[Annotated["Movie", strawberry.lazy(".movie")] | None] | None:
        """Get the movies this actor plays in."""
        from ..resolvers.actor import resolve_actor_movies

        return await resolve_actor_movies(self, info)
