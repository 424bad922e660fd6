"""Key-value storage with atomic write guarantees.

Each key is stored as its own JSON file below a base directory.
Atomic writes prevent data corruption by writing to temporary files first.
"""

import re
from pathlib import Path
from typing import Protocol

from loguru import logger

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


def is_valid_storage_key(key: str) -> bool:
    """Keys become file names, so only a conservative character set is allowed."""
    return bool(_SAFE_KEY.match(key))


class KeyValueStore(Protocol):
    """String-valued durable storage addressed by key."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class FileKeyValueStore:
    """Manages atomic read/write operations for one file per key."""

    def __init__(self, base_path: Path) -> None:
        """Initialize storage with a base directory.

        Args:
            base_path: Root directory for all stored keys
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"FileKeyValueStore initialized at {self.base_path}")

    def _path_for(self, key: str) -> Path:
        if not is_valid_storage_key(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never written."""
        target_path = self._path_for(key)
        if not target_path.exists():
            logger.debug(f"No stored value for '{key}' at {target_path}")
            return None
        logger.debug(f"Reading {target_path}")
        return target_path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        """Write value with atomic guarantees.

        Writes to a temporary file first, then renames to the target filename.
        This ensures the target file is never left in a partially written state.
        """
        target_path = self._path_for(key)
        tmp_path = self.base_path / f"{target_path.name}.tmp"

        try:
            tmp_path.write_text(value, encoding="utf-8")
            # Atomic rename (overwrites target if it exists)
            tmp_path.replace(target_path)
            logger.debug(f"Atomically wrote {len(value)} chars to {target_path}")

        except Exception as e:
            if tmp_path.exists():
                tmp_path.unlink()
            logger.error(f"Failed to write {target_path}: {e}")
            raise
