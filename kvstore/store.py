# kvstore/store.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Sibling-keeping key-value store driven by version vectors and dots

"""In-memory key-value store that keeps concurrent writes as siblings.

Clients follow the read-context-then-write protocol of highly available
key-value stores: a read returns the current values together with the
store's version vector as *context*, and the next write echoes that context
back. The store uses it to tell a write that has seen everything (overwrite)
from one that raced with other writers (keep siblings).

Each stored value carries the :class:`~core.Dot` of the increment that
created it. On a concurrent write, prior siblings whose dot is dominated by
the new write's dot are dropped; the rest stay alongside the new value.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from core import Actor, Dot, VersionVector
from utils.logger import get_logger
from .exceptions import KeyNotFoundError


@dataclass(frozen=True)
class StoredValue:
    """A value together with the dot of the write that produced it."""

    value: Any
    dot: Dot

    def __str__(self) -> str:
        return f"{self.value!r}@{self.dot}"


@dataclass(frozen=True)
class ReadResult:
    """Values of a key plus the context to echo back on the next write."""

    values: Tuple[StoredValue, ...]
    context: VersionVector


class KVStore:
    """Single-node store mapping keys to lists of sibling values.

    The store holds one version vector shared by all keys. It is a mutable,
    single-threaded object; callers coordinate concurrent access.
    """

    def __init__(self) -> None:
        self._data: Dict[str, List[StoredValue]] = {}
        self._vector = VersionVector.new()
        self.logger = get_logger()

    @property
    def vector(self) -> VersionVector:
        """Current store version vector."""
        return self._vector

    def get(self, key: str) -> ReadResult:
        """Read all siblings of key and the current context.

        Unknown keys yield an empty value tuple, never an error.
        """
        values = tuple(self._data.get(key, ()))
        return ReadResult(values=values, context=self._vector)

    def siblings(self, key: str) -> Tuple[StoredValue, ...]:
        """Siblings stored for key.

        Raises:
            KeyNotFoundError: If key was never written
        """
        if key not in self._data:
            raise KeyNotFoundError(key)
        return tuple(self._data[key])

    def put(
        self, actor: Actor, context: VersionVector, key: str, value: Any
    ) -> StoredValue:
        """Write value for key on behalf of actor.

        Args:
            actor: Writer whose counter is incremented
            context: Version vector the writer last read
            key: Key to write
            value: Value to store

        Returns:
            The stored value with its new dot
        """
        if context.descends(self._vector):
            # The writer has seen everything: replace all siblings
            self._vector = self._vector.increment(actor)
            stored = StoredValue(value, self._vector.get_dot(actor))
            self._data[key] = [stored]
            self.logger.write_applied(str(actor), key, "overwrite", str(stored.dot), 1)
            return stored

        frontier = self._vector.merge(context).increment(actor)
        self.logger.context_merged(key, str(self._vector), str(context), str(frontier))
        self._vector = frontier

        stored = StoredValue(value, frontier.get_dot(actor))
        self._data[key] = self._merge_siblings(key, stored)
        self.logger.write_applied(
            str(actor), key, "concurrent", str(stored.dot), len(self._data[key])
        )
        return stored

    def _merge_siblings(self, key: str, new_value: StoredValue) -> List[StoredValue]:
        """Drop siblings superseded by new_value and append it."""
        updated = []
        for existing in self._data.get(key, []):
            if new_value.dot.descends(existing.dot):
                self.logger.sibling_pruned(
                    key, repr(existing.value), str(existing.dot), str(new_value.dot)
                )
                continue
            self.logger.sibling_kept(key, repr(existing.value), str(existing.dot))
            updated.append(existing)
        updated.append(new_value)
        return updated

    def keys(self) -> List[str]:
        return sorted(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
