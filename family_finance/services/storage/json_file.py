"""
JSON File Name Store

Persists name overrides as a single JSON object in a file, the local
equivalent of browser local storage.

TRADEOFFS:
- Every write rewrites the whole file (we hold three keys at most)
- No locking; a single user edits names at a time
- A broken file reads as empty rather than failing the dashboard
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog

from family_finance.services.storage.interface import (
    NameStoreInterface,
    StoreUnavailableError,
)


class JsonFileNameStore(NameStoreInterface):
    """
    File-backed name store.

    The file is read on every `get_item` so edits made by another
    process (e.g. the settings page) show up without a restart.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        """Get the file backing this store."""
        return self._path

    def _load(self) -> dict[str, str]:
        """Read the file, treating anything unusable as an empty store."""
        if not self._path.exists():
            return {}

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._logger.warning(
                "name_store_unreadable",
                path=str(self._path),
                error=str(e),
            )
            return {}

        if not isinstance(raw, dict):
            self._logger.warning(
                "name_store_malformed",
                path=str(self._path),
                found=type(raw).__name__,
            )
            return {}

        # Skip anything that isn't a plain string
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _save(self, items: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(items, ensure_ascii=False, indent=2, sort_keys=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise StoreUnavailableError(
                f"Could not write name store {self._path}: {e}"
            ) from e

    def get_item(self, key: str) -> Optional[str]:
        """Read a name from the file, or None if absent."""
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Write a name, rewriting the whole file."""
        items = self._load()
        items[key] = value
        self._save(items)
        self._logger.info("name_store_updated", key=key)

    def remove_item(self, key: str) -> None:
        """Remove a name from the file if present."""
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._save(items)
        self._logger.info("name_store_key_removed", key=key)
