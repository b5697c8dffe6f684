from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from ..core.exceptions import PersistenceError


class KeyValueStorage(Protocol):
    """Persistent string store addressed by key.

    Repositories depend on this interface, not on a concrete backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError


class JsonFileStorage:
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temp file first and are moved into place, so a failed write
    never leaves a half-written blob behind.
    """

    def __init__(self, directory: str | Path, *, quota_bytes: Optional[int] = None):
        self._directory = Path(directory)
        self._quota_bytes = quota_bytes

    @property
    def directory(self) -> Path:
        return self._directory

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"Cannot read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        data = value.encode("utf-8")
        if self._quota_bytes is not None and len(data) > self._quota_bytes:
            raise PersistenceError(
                f"Storage quota exceeded for {key!r} ({len(data)} > {self._quota_bytes} bytes)"
            )

        path = self._path(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"Cannot write {path}: {e}") from e


class MemoryStorage:
    """Process-local storage (tests, throwaway runs)."""

    def __init__(self, initial: Optional[dict[str, str]] = None, *, quota_bytes: Optional[int] = None):
        self._items: dict[str, str] = dict(initial or {})
        self._quota_bytes = quota_bytes

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        size = len(value.encode("utf-8"))
        if self._quota_bytes is not None and size > self._quota_bytes:
            raise PersistenceError(f"Storage quota exceeded for {key!r} ({size} > {self._quota_bytes} bytes)")
        self._items[key] = value


@dataclass
class StorageConfig:
    backend: str
    directory: Optional[str] = None
    quota_bytes: Optional[int] = None


def open_storage(config: StorageConfig) -> KeyValueStorage:
    if config.backend == "memory":
        return MemoryStorage(quota_bytes=config.quota_bytes)
    if config.backend == "file":
        if not config.directory:
            raise ValueError("File storage needs a directory")
        return JsonFileStorage(config.directory, quota_bytes=config.quota_bytes)
    raise ValueError(f"Unknown storage backend: {config.backend!r}")
