"""
Record types held by the in-memory store
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """A single actor."""

    id: int
    name: str


@dataclass(frozen=True)
class Movie:
    """A single movie, linked to its actor by ``actor_id``."""

    id: int
    name: str
    actor_id: int
