"""
Root GraphQL query definitions
"""

import strawberry

from ..types.actor import Actor
from ..types.movie import Movie


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="A single movie")
    async def movie(self, info: strawberry.Info, id: int | None = None) -> Movie | None:
        from ..resolvers.movie import resolve_movie_by_id

        return await resolve_movie_by_id(info, id)

    @strawberry.field(description="List of all the movies")
    async def movies(self, info: strawberry.Info) -> list[Movie | None] | None:
        from ..resolvers.movie import resolve_movies

        return await resolve_movies(info)

    @strawberry.field(description="A single actor")
    async def actor(self, info: strawberry.Info, id: int | None = None) -> Actor | None:
        from ..resolvers.actor import resolve_actor_by_id

        return await resolve_actor_by_id(info, id)

    @strawberry.field(description="List of all the actors")
    async def actors(self, info: strawberry.Info) -> list[Actor | None] | None:
        from ..resolvers.actor import resolve_actors

        return await resolve_actors(info)
