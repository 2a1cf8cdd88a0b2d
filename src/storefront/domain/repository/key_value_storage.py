"""Abstract local key-value storage.

Each key names a slot holding one raw string. Writes overwrite the
whole slot; there is no merging and no versioning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the raw value stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the slot ``key`` with ``value``."""
