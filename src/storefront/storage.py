"""Local durable storage: named string blobs kept in a single JSON file."""

import json
import os
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_PATH = ".shopwise/storage.json"


class MemoryStorage:
    """Non-durable storage with the same interface, for ephemeral sessions and tests."""

    def __init__(self, initial=None):
        self._blobs = dict(initial or {})

    def get(self, key):
        return self._blobs.get(key)

    def set(self, key, value):
        self._blobs[key] = value

    def remove(self, key):
        self._blobs.pop(key, None)


class LocalStorage:
    """Blobs persisted to `path`; the file is rewritten after every change.

    An unreadable or malformed file is logged and treated as empty.
    """

    def __init__(self, path=None):
        self.path = Path(path or os.getenv("SHOPWISE_STORAGE_PATH", DEFAULT_STORAGE_PATH))

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("storage_unreadable", path=str(self.path), error=str(exc))
            return {}
        if not isinstance(data, dict):
            logger.warning("storage_unreadable", path=str(self.path), error="not a JSON object")
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get(self, key):
        return self._read().get(key)

    def set(self, key, value):
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key):
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
