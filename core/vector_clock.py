# core/vector_clock.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Immutable vector clock for happened-before reasoning between events

"""Immutable Mattern–Fidge vector clock.

Supports:
  •  Strict happened-before (<) between two snapshots.
  •  Concurrency detection (‖) as a derived relation.
  •  Join (⊔) to merge observations across actors.
"""

from __future__ import annotations

from .counters import CounterMap, dominates, strictly_precedes


class VectorClock(CounterMap):
    """Snapshot of how many events each actor has observed.

    Build a clock by chaining increments, one per locally observed event:

        >>> a = VectorClock.new().increment("A").increment("A").increment("B")
        >>> b = a.increment("B")
        >>> a.happened_before(b)
        True
    """

    def happened_before(self, other: VectorClock) -> bool:
        """
        True iff every component of self is ≤ other's and at least one is <.
        Irreflexive: a clock never happened-before an identical snapshot.
        """
        self._require_same_kind(other)
        return strictly_precedes(self._lookup, other._lookup)

    def concurrent(self, other: VectorClock) -> bool:
        """
        True if neither clock happened-before the other.
        Equal clocks are concurrent under this definition.
        """
        return not self.happened_before(other) and not other.happened_before(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return self.happened_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return dominates(other._lookup, self._lookup)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return other.happened_before(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VectorClock):
            return NotImplemented
        return dominates(self._lookup, other._lookup)
