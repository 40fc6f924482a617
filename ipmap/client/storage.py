"""
Durable key/value storage for client state.

Values are JSON strings stored under string keys, the same contract the
web client had with browser local storage. ``JsonFileStorage`` keeps all
keys in one JSON object on disk and rewrites it atomically on each write.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """Minimal string key/value interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Stored value for ``key``, or None."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""
        pass


class MemoryStorage(KeyValueStorage):
    """Process-local storage, used in tests and for throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """
    All keys in a single JSON object file.

    An unreadable or malformed file is treated as empty; it is replaced on
    the next write.
    """

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning(f"Could not read client state {self.path}: {e}")
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Client state {self.path} is not valid JSON, ignoring it: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Client state {self.path} is not a JSON object, ignoring it")
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
