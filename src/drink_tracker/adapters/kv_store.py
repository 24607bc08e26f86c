"""Byte-blob key-value stores backing the drink repositories."""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


class KeyValueStore(Protocol):
    """Generic get/set storage of byte blobs by key."""

    def get(self, key: str) -> bytes | None:
        """Return the blob stored under ``key``, if any."""

    def set(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any previous blob."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, used for demos and tests."""

    data: dict[str, bytes] = field(default_factory=dict)

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = value


@dataclass
class FileKeyValueStore(KeyValueStore):
    """Store each key as a JSON file inside ``directory``."""

    directory: Path

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> bytes | None:
        """Return the file contents for ``key``, or None when missing."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        """Write the blob atomically via a temporary file."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            Path(tmp_name).replace(self._path(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
