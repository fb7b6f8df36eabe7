"""
Storage Services Package

Provides the abstract name store interface and its implementations.
"""

from family_finance.services.storage.interface import (
    NameStoreInterface,
    StorageError,
    StoreUnavailableError,
)
from family_finance.services.storage.in_memory import InMemoryNameStore
from family_finance.services.storage.json_file import JsonFileNameStore

__all__ = [
    # Interface
    "NameStoreInterface",
    # Exceptions
    "StorageError",
    "StoreUnavailableError",
    # Implementations
    "InMemoryNameStore",
    "JsonFileNameStore",
]
