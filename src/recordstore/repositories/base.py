"""
Base Repository - Abstract interface for collection access

This defines the contract that all repository implementations must follow.
Allows swapping the JSON file store for another backend without changing
the API routers or the CLI.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from recordstore.resources import Predicate, ResourceConfig


class BaseRepository(ABC):
    """Abstract base class for record repositories"""

    resource: ResourceConfig

    @abstractmethod
    def list_records(self) -> List[Dict[str, Any]]:
        """
        Get the complete collection, freshly loaded from storage.

        Returns:
            Records in insertion order (empty list if the store is absent)

        Raises:
            StorageReadError: Store exists but cannot be parsed
        """
        pass

    @abstractmethod
    def get_by_id(self, record_id: str) -> Dict[str, Any]:
        """
        Get one record by exact id match.

        Raises:
            NotFoundError: No record has this id
        """
        pass

    @abstractmethod
    def find(self, predicate: Predicate) -> Iterator[Dict[str, Any]]:
        """
        Lazily filter the collection.

        Args:
            predicate: Callable returning True for records to keep

        Returns:
            Iterator over matching records (may be empty)
        """
        pass

    @abstractmethod
    def create(
        self,
        fields: Mapping[str, Any],
        required_fields: Optional[Sequence[str]] = None
    ) -> Dict[str, Any]:
        """
        Validate, assign a fresh id, append and persist a new record.

        Args:
            fields: Field values supplied by the caller
            required_fields: Override for the resource's required fields

        Raises:
            ValidationError: A required field is missing or empty
            StorageError: Store could not be read or written
        """
        pass

    @abstractmethod
    def update(self, record_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Merge ``fields`` over an existing record and persist.

        The record id never changes. An empty field set is a no-op.

        Raises:
            NotFoundError: No record has this id
            StorageError: Store could not be read or written
        """
        pass

    @abstractmethod
    def delete(self, record_id: str) -> Dict[str, Any]:
        """
        Remove a record and persist the shortened collection.

        Returns:
            The removed record

        Raises:
            NotFoundError: No record has this id
            StorageError: Store could not be read or written
        """
        pass

    def count(self) -> int:
        """Number of records currently stored"""
        return len(self.list_records())
