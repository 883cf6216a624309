from strawberry.dataloader import DataLoader

from ..store import Actor, Movie, RecordStore, movies_by_actor_ids


class Loaders:
    """Per-request batching loaders over a record store."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.actor_loader = DataLoader(load_fn=self.load_actors)
        self.movies_by_actor_loader = DataLoader(load_fn=self.load_movies_by_actor)

    async def load_actors(self, keys: list[int]) -> list[Actor | None]:
        """Batch load actors by ID."""
        return [self.store.find_actor_by_id(key) for key in keys]

    async def load_movies_by_actor(self, keys: list[int]) -> list[list[Movie]]:
        """Batch load each actor's movies by actor ID."""
        return movies_by_actor_ids(self.store, keys)
