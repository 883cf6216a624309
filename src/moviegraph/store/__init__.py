"""
In-memory movie and actor storage
"""

from .memory import RecordStore
from .models import Actor, Movie
from .relations import actor_of, movies_by_actor_ids, movies_of
from .seed_data import SeedData, SeedDataError, default_seed, load_seed, load_seed_file

__all__ = [
    "Actor",
    "Movie",
    "RecordStore",
    "SeedData",
    "SeedDataError",
    "actor_of",
    "default_seed",
    "load_seed",
    "load_seed_file",
    "movies_by_actor_ids",
    "movies_of",
]
