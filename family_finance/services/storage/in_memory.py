"""In-memory name store, used by tests and when no store file is configured."""

from typing import Mapping, Optional

from family_finance.services.storage.interface import NameStoreInterface


class InMemoryNameStore(NameStoreInterface):
    """Dict-backed name store. Contents are lost with the process."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        """Read a name, or None if absent."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store a name."""
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        """Remove a name if present."""
        self._items.pop(key, None)
