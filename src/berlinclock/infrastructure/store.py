"""JSON key-value state file that survives between CLI invocations.

Stores UI selections and the configuration being edited exactly as given.
The store never interprets values; callers own their shape.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class StateStoreError(Exception):
    """The state file exists but cannot be read as a JSON object."""


class StateStore:
    """Opaque get/set over a single JSON file.

    The file is created on the first :meth:`set`. Writes go through a
    temporary sibling and ``os.replace`` so a crash never leaves half a file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._write(data)
        logger.debug("State key written: %s", key)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._write(data)
            logger.debug("State key deleted: %s", key)

    def _load(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Cannot read state file {self.path}: {exc}"
            raise StateStoreError(msg) from exc
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in state file {self.path}: {exc}"
            raise StateStoreError(msg) from exc
        if not isinstance(data, dict):
            msg = f"State file {self.path} must hold a JSON object"
            raise StateStoreError(msg)
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f"{self.path.name}.tmp")
        tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)
