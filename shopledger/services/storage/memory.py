"""
In-Memory Key-Value Store

Keeps values as serialized JSON text, exactly like browser localStorage.
Serializing on write means a value that could not be saved for real
fails here too, and every get() returns a fresh copy.
"""

import json
from typing import Any, Optional

from shopledger.services.storage.interface import (
    KeyValueStoreInterface,
    MalformedDataError,
    StorageWriteError,
)


class InMemoryKeyValueStore(KeyValueStoreInterface):
    """Dictionary-backed store, used by tests and the "memory" backend."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        """
        Args:
            initial: Raw JSON text per key, as if written by an earlier
                    session. Not validated until read.
        """
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"Value under {key!r} is not valid JSON: {e}")

    def set(self, key: str, value: Any) -> bool:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(f"Cannot serialize value for {key!r}: {e}")
        return True

    def raw(self, key: str) -> Optional[str]:
        """The stored JSON text for a key, undecoded."""
        return self._data.get(key)

    def keys(self) -> list[str]:
        return sorted(self._data)
