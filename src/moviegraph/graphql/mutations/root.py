"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.movie import Movie


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addMovie", description="Add a movie")
    async def add_movie(self, info: strawberry.Info, name: str, actor_id: int) -> Movie | None:
        from ..resolvers.movie import add_movie

        return await add_movie(info, name, actor_id)
