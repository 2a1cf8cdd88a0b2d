"""JSON-file-backed implementation of KeyValueStorage.

The whole store is one JSON object mapping slot names to raw strings,
rewritten in full on every ``set``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.repository.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- KeyValueStorage interface --------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        slots = self._load_raw()
        slots[key] = value
        self._persist_raw(slots)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning("Storage file %s is corrupt, treating as empty: %s", self._file_path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _persist_raw(self, slots: dict) -> None:
        self._file_path.write_text(
            json.dumps(slots, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
