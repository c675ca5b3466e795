"""
JSON File Key-Value Store

DESIGN DECISION: One file per key under a data directory
(data/app-sales.json, data/app-vendors.json, ...). This is the closest
on-disk equivalent of localStorage:
1. A corrupt file only loses its own key
2. Each collection is written independently, as a whole
3. Users can open the files and read their data

Writes go to a temporary file first and are moved into place with
os.replace, so a crash mid-write never leaves a half-written file.
Transient OS errors (locked file, full disk being cleaned) are retried
with tenacity before giving up.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from shopledger.logs import get_logger
from shopledger.services.storage.interface import (
    KeyValueStoreInterface,
    MalformedDataError,
    StorageError,
    StorageWriteError,
)


logger = get_logger(__name__)

# Keys become file names
_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileKeyValueStore(KeyValueStoreInterface):
    """Stores each key as <data_dir>/<key>.json."""

    def __init__(
        self,
        data_dir: Union[str, Path],
        write_attempts: int = 3,
        retry_wait_seconds: float = 0.2,
    ):
        """
        Args:
            data_dir: Directory for the JSON files. Created on first write.
            write_attempts: Total attempts per write before StorageWriteError
            retry_wait_seconds: Base of the exponential wait between attempts
        """
        self._data_dir = Path(data_dir)
        self._write_attempts = write_attempts
        self._retry_wait_seconds = retry_wait_seconds

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        """File backing a key."""
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self._data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        path = self.path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}")

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"{path} is not valid JSON: {e}")

    def set(self, key: str, value: Any) -> bool:
        path = self.path_for(key)
        try:
            text = json.dumps(value, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(f"Cannot serialize value for {key!r}: {e}")

        retrying = Retrying(
            stop=stop_after_attempt(self._write_attempts),
            wait=wait_exponential(multiplier=self._retry_wait_seconds, max=2),
            retry=retry_if_exception_type(OSError),
            reraise=False,
        )
        try:
            for attempt in retrying:
                with attempt:
                    self._atomic_write(path, text)
        except RetryError as e:
            cause = e.last_attempt.exception()
            logger.warning(
                "file_write_gave_up",
                path=str(path),
                attempts=self._write_attempts,
                error=str(cause),
            )
            raise StorageWriteError(f"Cannot write {path}: {cause}")

        return True

    def _atomic_write(self, path: Path, text: str) -> None:
        """Write to a temp file, then move it over the real one."""
        os.makedirs(path.parent, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
