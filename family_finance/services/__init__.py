"""Services package."""

from family_finance.services.storage import (
    InMemoryNameStore,
    JsonFileNameStore,
    NameStoreInterface,
    StorageError,
    StoreUnavailableError,
)

__all__ = [
    "InMemoryNameStore",
    "JsonFileNameStore",
    "NameStoreInterface",
    "StorageError",
    "StoreUnavailableError",
]
