"""
Lookups for the actor/movie relationship.

One actor has many movies and each movie points at exactly one actor through
``actor_id``. The reference is never enforced, so ``actor_of`` returns None for
a dangling ``actor_id`` instead of raising.
"""

from collections.abc import Sequence

from .memory import RecordStore
from .models import Actor, Movie


def actor_of(store: RecordStore, movie: Movie) -> Actor | None:
    return store.find_actor_by_id(movie.actor_id)


def movies_of(store: RecordStore, actor: Actor) -> list[Movie]:
    """Movies played by ``actor``, in movie insertion order."""
    return [movie for movie in store.list_movies() if movie.actor_id == actor.id]


def movies_by_actor_ids(store: RecordStore, actor_ids: Sequence[int]) -> list[list[Movie]]:
    """Batch form of ``movies_of``; the result is aligned with ``actor_ids``."""
    grouped: dict[int, list[Movie]] = {actor_id: [] for actor_id in actor_ids}
    for movie in store.list_movies():
        if movie.actor_id in grouped:
            grouped[movie.actor_id].append(movie)
    return [list(grouped[actor_id]) for actor_id in actor_ids]
