"""
Abstract Name Store Interface

DESIGN DECISION: Display-name overrides live in a key-value store that
the provider only reads from. We define an abstract interface so that:
1. Tests can use an in-memory dict
2. The demo UI can persist names to a JSON file
3. Nothing reaches for global state

Absence of a key is the normal case, not an error.
"""

from abc import ABC, abstractmethod
from typing import Optional


class NameStoreInterface(ABC):
    """
    Abstract interface for the key-value store holding name overrides.

    The provider only ever calls `get_item`. The write operations exist
    for the family settings page.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Store key, e.g. 'member_name_father'

        Returns:
            The stored string, or None if the key is absent
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Raises:
            StorageError: If the value could not be written
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing a missing key is a no-op.

        Raises:
            StorageError: If the store could not be written
        """
        pass


class StorageError(Exception):
    """Base exception for name store operations."""
    pass


class StoreUnavailableError(StorageError):
    """The backing store could not be written."""
    pass
