"""
Abstract Key-Value Storage Interface

DESIGN DECISION: The ledger persists whole collections as JSON blobs under
fixed keys, the way a browser's localStorage would. That is all the
storage layer has to do, so the interface is two methods:

    get(key) -> JSON value or None
    set(key, JSON value) -> True on success

This allows us to:
1. Use in-memory storage for testing
2. Keep one JSON file per key on disk for the Streamlit app
3. Swap in any other key-value backend later

Implementations raise StorageError subclasses. Callers in the record store
catch them: persistence is best-effort and never takes the app down.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class KeyValueStoreInterface(ABC):
    """
    Abstract interface for JSON key-value persistence.

    Values are anything json.dumps accepts (lists, dicts, strings, numbers).
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Read the value stored under a key.

        Args:
            key: The storage key (e.g. "app-sales")

        Returns:
            The decoded JSON value, or None if the key was never written

        Raises:
            MalformedDataError: If the stored text is not valid JSON
            StorageError: If the backend could not be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """
        Replace the value stored under a key.

        Args:
            key: The storage key
            value: JSON-serializable value

        Returns:
            True if the value was written

        Raises:
            StorageWriteError: If the value could not be serialized or written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class MalformedDataError(StorageError):
    """Stored data exists but cannot be decoded."""
    pass


class StorageWriteError(StorageError):
    """A value could not be serialized or written."""
    pass
