"""
Key-value document stores.

Each key holds one whole document (a dict), read and written in one piece.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import logging
import os
import re

from checkout_trainer.core import atomic_write_yaml, load_yaml

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore(ABC):
    """Abstract whole-document store keyed by string."""

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the stored document, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: Dict[str, Any]) -> None:
        """Replace the stored document."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the document if present."""
        pass


class MemoryStore(KeyValueStore):
    """In-process store; documents are deep-copied in and out."""

    def __init__(self):
        self._data: Dict[str, Dict[str, Any]] = {}

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Dict[str, Any]) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class YamlFileStore(KeyValueStore):
    """
    One YAML file per key inside a directory.

    Writes are atomic; deletes leave a .bak copy behind.
    """

    def __init__(self, directory: Path = Path("data")):
        """
        Initialize store.

        Args:
            directory: Directory holding the YAML files (created if missing)
        """
        self.directory = Path(directory).resolve()
        self.directory.mkdir(parents=True, exist_ok=True)
        logger.info(f"YAML store at {self.directory}")

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.directory / f"{key}.yaml"

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path(key)
        if not path.exists():
            return None
        return load_yaml(path)

    def set(self, key: str, value: Dict[str, Any]) -> None:
        atomic_write_yaml(self._path(key), value)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            backup = path.with_name(path.name + ".bak")
            os.replace(path, backup)
            logger.info(f"Deleted {path}, kept {backup.name}")
