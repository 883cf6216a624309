"""
moviegraph
GraphQL API server for movies and their actors
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
