"""
Storage Services Package

Provides the abstract key-value interface and its two implementations:
in-memory (tests, throwaway sessions) and one-JSON-file-per-key on disk.
"""

from shopledger.services.storage.interface import (
    KeyValueStoreInterface,
    MalformedDataError,
    StorageError,
    StorageWriteError,
)
from shopledger.services.storage.memory import InMemoryKeyValueStore
from shopledger.services.storage.json_file import JsonFileKeyValueStore

__all__ = [
    # Interface
    "KeyValueStoreInterface",
    # Exceptions
    "MalformedDataError",
    "StorageError",
    "StorageWriteError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
