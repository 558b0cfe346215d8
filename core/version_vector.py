# core/version_vector.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Version vectors and dots for tracking the causal history of a single datum

"""Version vectors and the dots extracted from them.

A :class:`VersionVector` counts, per actor, the updates applied to one piece
of data. Unlike a vector clock its dominance test is non-strict: a vector
*descends* itself and any vector it is component-wise ≥ on.

A :class:`Dot` names a single update, the (actor, counter) pair an actor
held right after incrementing. Dots are only ever read out of a vector with
:meth:`VersionVector.get_dot`; direct construction is refused so callers
cannot fabricate pairs no vector ever held.

Every comparison involving a dot looks only at the dot's actor.
``vv.descends(dot)`` asks whether the vector has seen the dot's event and
``dot.descends(vv)`` asks whether the dot is at or past the vector's entry
for that actor. Between two dots the rule is that of singleton vectors, so
dots of different actors are unordered.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .counters import Actor, CounterMap, check_actor, counter_of, dominates


class VersionVector(CounterMap):
    """Per-actor update counts for one datum.

    Example:
        >>> local = VersionVector.new().increment("A")
        >>> remote = VersionVector.new().increment("B")
        >>> merged = local.merge(remote).increment("A")
        >>> merged.descends(local), merged.descends(remote)
        (True, True)
        >>> merged.get_dot("A")
        Dot(actor='A', counter=2)
    """

    def get_dot(self, actor: Actor) -> Dot:
        """Dot for actor's current counter (0 if the actor is absent)."""
        check_actor(actor)
        return _issue_dot(actor, self.get(actor))

    def descends(self, other: Union[VersionVector, Dot]) -> bool:
        """True iff self[a] >= other[a] for every actor present in other.

        Args:
            other: Version vector, or a dot compared as a singleton vector

        Raises:
            TypeError: If other is neither a VersionVector nor a Dot
        """
        if isinstance(other, Dot):
            return counter_of(self._lookup, other.actor) >= other.counter
        self._require_same_kind(other)
        return dominates(self._lookup, other._lookup)

    def concurrent(self, other: VersionVector) -> bool:
        """True if neither vector descends the other."""
        return not self.descends(other) and not other.descends(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (VersionVector, Dot)):
            return NotImplemented
        return self.descends(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (VersionVector, Dot)):
            return NotImplemented
        return other.descends(self)


@dataclass(frozen=True, init=False)
class Dot:
    """Identifier of a single update: (actor, counter).

    Instances come only from :meth:`VersionVector.get_dot`. Calling the
    class, or ``dataclasses.replace`` on a dot, raises TypeError.

    Attributes:
        actor: Actor that performed the update
        counter: Actor's counter immediately after the update
    """

    actor: Actor
    counter: int

    def __init__(self, *args, **kwargs) -> None:
        raise TypeError("Dots are obtained from VersionVector.get_dot()")

    def as_vector(self) -> VersionVector:
        """Singleton version vector {actor: counter}; empty when counter is 0."""
        return VersionVector({self.actor: self.counter})

    def descends(self, other: Union[VersionVector, Dot]) -> bool:
        """True iff this dot is at or past other's counter for this dot's actor.

        Against another dot both are read as singleton vectors, so a dot of
        a different actor is descended only when its counter is 0.

        Raises:
            TypeError: If other is neither a VersionVector nor a Dot
        """
        if isinstance(other, VersionVector):
            return self.counter >= other.get(self.actor)
        if not isinstance(other, Dot):
            raise TypeError(f"Cannot compare Dot with {type(other).__name__}")
        return self.as_vector().descends(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (VersionVector, Dot)):
            return NotImplemented
        return self.descends(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (VersionVector, Dot)):
            return NotImplemented
        return other.descends(self)

    def __str__(self) -> str:
        return f"({self.actor}, {self.counter})"


def _issue_dot(actor: Actor, counter: int) -> Dot:
    dot = object.__new__(Dot)
    object.__setattr__(dot, "actor", actor)
    object.__setattr__(dot, "counter", counter)
    return dot
