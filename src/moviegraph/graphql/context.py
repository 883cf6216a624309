"""
Access to per-request GraphQL context values
"""

from typing import Any

import strawberry

from ..store import RecordStore
from .loaders import Loaders


def build_context(store: RecordStore, **extra: Any) -> dict[str, Any]:
    """Build the context dict handed to resolvers for one request."""
    return {"store": store, "loaders": Loaders(store), **extra}


def get_store(info: strawberry.Info) -> RecordStore:
    return info.context["store"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
