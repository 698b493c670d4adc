"""
Repositories - Data access abstraction layer

Each resource kind gets its own repository instance owning one collection.
The interface can be backed by local JSON files (current) or a database
(future) without changing the API or the CLI.

Pattern: Repository Pattern
"""

from recordstore.repositories.base import BaseRepository
from recordstore.repositories.local import LocalFileRepository

__all__ = ["BaseRepository", "LocalFileRepository"]
