"""Key-value persistence: the browser-storage equivalent, behind an injectable interface."""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from astrax.utils.logger import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """
    String keys to string (JSON-encoded) values.

    `lock` is re-entrant; repositories hold it across every
    read-modify-write of a key.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store for tests and single-session use."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        super().__init__()
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())


class JsonFileKeyValueStore(KeyValueStore):
    """
    All keys in one JSON object on disk. Missing or empty file means an empty
    store; a corrupt file is logged and treated as empty (and overwritten on
    the next write). Writes go to a temp file in the same directory, then replace.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = Path(path)
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            content = self._path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning("Could not read store %s: %s", self._path, e)
            return {}
        if not content:
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Store %s is not valid JSON, starting empty: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store %s does not hold a JSON object, starting empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), prefix=".astrax-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self._path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self.lock:
            self._data[key] = value
            self._flush()

    def remove(self, key: str) -> None:
        with self.lock:
            if key in self._data:
                del self._data[key]
                self._flush()

    def keys(self) -> List[str]:
        return list(self._data.keys())
