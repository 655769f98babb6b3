"""
Entity map for ServiceBay NLU.

A per-analysis builder mapping lowercase entity types to a single string
value.  Writers choose a mode explicitly: span merging overwrites earlier
values, while the vehicle and customer-name extractors only fill keys
that are still absent.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping


class WriteMode(str, enum.Enum):
    """How a write treats an existing value for the same key."""

    OVERWRITE = "overwrite"
    SET_IF_ABSENT = "set_if_absent"


class EntityMap(Mapping[str, str]):
    """Mutable entity-type → value map with explicit write modes.

    Keys are normalised to lowercase.  Empty or whitespace-only values are
    never stored.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = {}
        if initial:
            for key, value in initial.items():
                self.merge(key, value)

    def write(self, key: str, value: str, mode: WriteMode) -> bool:
        """Store *value* under *key* according to *mode*.

        Returns:
            ``True`` if the map changed.
        """
        value = value.strip()
        if not value:
            return False
        key = key.lower()
        if mode is WriteMode.SET_IF_ABSENT and key in self._data:
            return False
        self._data[key] = value
        return True

    def merge(self, key: str, value: str) -> bool:
        """Overwrite any existing value for *key*."""
        return self.write(key, value, WriteMode.OVERWRITE)

    def set_if_absent(self, key: str, value: str) -> bool:
        """Store *value* only if *key* has no value yet."""
        return self.write(key, value, WriteMode.SET_IF_ABSENT)

    def as_dict(self) -> dict[str, str]:
        """Return a detached copy of the current entries."""
        return dict(self._data)

    def __getitem__(self, key: str) -> str:
        return self._data[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"EntityMap({self._data!r})"
