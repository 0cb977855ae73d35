"""JSON file storage backend for the session store."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileSessionStorage:
    """Key-value storage persisted as a single JSON object on disk."""

    path: Path

    @classmethod
    def create(cls, path: str | Path) -> "JsonFileSessionStorage":
        """Create a storage rooted at ``path``, expanding ``~``."""
        return cls(path=Path(path).expanduser())

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, *keys: str) -> None:
        """Remove keys in a single write."""
        data = self._read()
        if not any(key in data for key in keys):
            return
        for key in keys:
            data.pop(key, None)
        self._write(data)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable session file %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.path)
