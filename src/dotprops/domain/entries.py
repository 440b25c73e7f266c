"""Flat key/value entries and the lookup index the decoder walks.

An entry is one ``dotted.key=value`` declaration after extraction. The
index answers the two questions the decoder asks: "is there a value for
exactly this key?" and "is there anything below this key?".
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

KEY_SEPARATOR = "."


@dataclass(frozen=True)
class FlatEntry:
    """One extracted declaration: path segments plus the raw string value."""

    path: tuple[str, ...]
    value: str

    @classmethod
    def from_key(cls, key: str, value: str) -> FlatEntry:
        """Build an entry from a dotted key string."""
        return cls(path=tuple(key.split(KEY_SEPARATOR)), value=value)

    @property
    def key(self) -> str:
        return KEY_SEPARATOR.join(self.path)


def join_key(prefix: str, key: str) -> str:
    """Join a prefix and a binding key; an empty prefix leaves *key* unchanged."""
    if not prefix:
        return key
    return f"{prefix}{KEY_SEPARATOR}{key}"


class EntryIndex:
    """Read-only lookup over a set of entries, keyed by dotted key.

    Every proper prefix of every key is precomputed so prefix queries are
    constant-time. When a key repeats, the last value wins.
    """

    def __init__(self, entries: Iterable[FlatEntry]) -> None:
        self._values: dict[str, str] = {}
        self._prefixes: set[str] = set()
        for entry in entries:
            self._values[entry.key] = entry.value
            for depth in range(1, len(entry.path)):
                self._prefixes.add(KEY_SEPARATOR.join(entry.path[:depth]))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def get(self, key: str) -> str | None:
        """Value stored under exactly *key*, or None."""
        return self._values.get(key)

    def has_prefix(self, key: str) -> bool:
        """True if some entry key starts with ``key + "."``."""
        return key in self._prefixes

    def matching(self, key: str) -> list[str]:
        """Keys equal to *key* or nested below it, in input order."""
        if key not in self._values and key not in self._prefixes:
            return []
        below = f"{key}{KEY_SEPARATOR}"
        return [k for k in self._values if k == key or k.startswith(below)]

    def keys(self) -> list[str]:
        return list(self._values)
