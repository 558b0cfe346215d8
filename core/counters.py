# core/counters.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Shared actor-to-counter map helpers used by vector clocks and version vectors

"""Zero-default counter maps shared by every clock type.

An actor missing from a map and an actor mapped to 0 are the same thing.
All helpers below read counters through :func:`counter_of`, and
:class:`CounterMap` drops zero entries on construction, so neither
comparisons, merges nor equality ever see the difference.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Set, Tuple, Union

from .exceptions import CounterOverflowError, InvalidActorError, InvalidCounterError

Actor = Union[str, int]

# Signed 64-bit bound
MAX_COUNTER = 2**63 - 1

# String actors matching this are written unquoted in clock notation
_BARE_ACTOR = re.compile(r"[a-zA-Z_][a-zA-Z0-9_.\-]*")


def check_actor(actor: object) -> Actor:
    """Validate an actor identifier.

    Raises:
        InvalidActorError: If actor is not a str or int (bool is rejected)
    """
    if isinstance(actor, bool) or not isinstance(actor, (str, int)):
        raise InvalidActorError(
            f"Actor must be a str or int, got {type(actor).__name__}: {actor!r}"
        )
    return actor


def check_counter(actor: Actor, counter: object) -> int:
    """Validate a counter value for the given actor.

    Raises:
        InvalidCounterError: If counter is not an int in [0, MAX_COUNTER]
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidCounterError(
            f"Counter for {actor!r} must be an int, got {type(counter).__name__}"
        )
    if counter < 0:
        raise InvalidCounterError(f"Counter for {actor!r} is negative: {counter}")
    if counter > MAX_COUNTER:
        raise InvalidCounterError(
            f"Counter for {actor!r} exceeds MAX_COUNTER: {counter}"
        )
    return counter


def actor_sort_key(actor: Actor) -> Tuple[int, Actor]:
    """Total order over mixed int/str actors: ints first, then strings."""
    return (1, actor) if isinstance(actor, str) else (0, actor)


def normalize(counters: Mapping[Actor, int]) -> Tuple[Tuple[Actor, int], ...]:
    """Validate a mapping and return its non-zero entries sorted by actor."""
    entries = []
    for actor, counter in counters.items():
        check_actor(actor)
        if check_counter(actor, counter):
            entries.append((actor, counter))
    return tuple(sorted(entries, key=lambda item: actor_sort_key(item[0])))


def counter_of(counters: Mapping[Actor, int], actor: Actor) -> int:
    """Counter for actor, 0 when absent."""
    return counters.get(actor, 0)


def all_actors(*maps: Mapping[Actor, int]) -> Set[Actor]:
    """Union of the actors appearing in any of the given maps."""
    actors: Set[Actor] = set()
    for counters in maps:
        actors.update(counters)
    return actors


def dominates(left: Mapping[Actor, int], right: Mapping[Actor, int]) -> bool:
    """Non-strict dominance: left[a] >= right[a] for every actor in right.

    Actors only present in left cannot break dominance since counters are
    never negative.
    """
    return all(counter_of(left, actor) >= counter for actor, counter in right.items())


def strictly_precedes(left: Mapping[Actor, int], right: Mapping[Actor, int]) -> bool:
    """Strict dominance of right over left across the union of actors.

    True iff left[a] <= right[a] for every actor and left[a] < right[a] for
    at least one.
    """
    at_least_one_less = False
    for actor in all_actors(left, right):
        left_value = counter_of(left, actor)
        right_value = counter_of(right, actor)

        if left_value > right_value:
            return False
        if left_value < right_value:
            at_least_one_less = True

    return at_least_one_less


def pointwise_max(
    left: Mapping[Actor, int], right: Mapping[Actor, int]
) -> Dict[Actor, int]:
    """Component-wise maximum over the union of actors."""
    return {
        actor: max(counter_of(left, actor), counter_of(right, actor))
        for actor in all_actors(left, right)
    }


def incremented(counters: Mapping[Actor, int], actor: Actor) -> Dict[Actor, int]:
    """Copy of counters with actor's counter raised by one.

    Raises:
        CounterOverflowError: If the new counter would exceed MAX_COUNTER
    """
    check_actor(actor)
    current = counter_of(counters, actor)
    if current >= MAX_COUNTER:
        raise CounterOverflowError(
            f"Counter for {actor!r} cannot be incremented past {MAX_COUNTER}"
        )
    result = dict(counters)
    result[actor] = current + 1
    return result


def format_actor(actor: Actor) -> str:
    """Render an actor bare when it reads back as itself, quoted otherwise.

    Ints and identifier-like strings are written as is. Any other string,
    including one made only of digits, is double-quoted with ``\\`` and ``"``
    escaped.
    """
    if isinstance(actor, int) or _BARE_ACTOR.fullmatch(actor):
        return str(actor)
    escaped = actor.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_entries(entries: Tuple[Tuple[Actor, int], ...]) -> str:
    """Render entries in clock notation, e.g. ``[A:2, B:3]``."""
    return (
        "["
        + ", ".join(f"{format_actor(actor)}:{counter}" for actor, counter in entries)
        + "]"
    )


@dataclass(frozen=True)
class CounterMap:
    """Immutable actor-to-counter map with zero-default lookup.

    Entries are kept as a sorted tuple of (actor, counter) pairs without
    zeros, which makes equality and hashing independent of insertion order
    and of explicit zero entries. A dictionary view is kept alongside for
    constant-time lookup.

    Attributes:
        entries: Tuple of (actor, counter) pairs sorted by actor
    """

    entries: Tuple[Tuple[Actor, int], ...]

    def __init__(self, counters: Optional[Mapping[Actor, int]] = None) -> None:
        """Initialize from an actor-to-counter mapping.

        Args:
            counters: Mapping of actor identifiers to non-negative counters

        Raises:
            InvalidActorError: If an actor is not a str or int
            InvalidCounterError: If a counter is out of range
        """
        entries = normalize(counters or {})
        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_lookup", dict(entries))

    @classmethod
    def new(cls):
        """Empty map: every actor implicitly at 0."""
        return cls()

    def get(self, actor: Actor) -> int:
        return counter_of(self._lookup, actor)

    @property
    def actors(self) -> frozenset:
        """Actors with a non-zero counter."""
        return frozenset(self._lookup)

    def to_dict(self) -> Dict[Actor, int]:
        return dict(self._lookup)

    def increment(self, actor: Actor):
        """Return a copy with actor's counter one greater.

        Raises:
            CounterOverflowError: If the counter is already at MAX_COUNTER
        """
        return self.__class__(incremented(self._lookup, actor))

    def merge(self, other):
        """Return the component-wise maximum of self and other."""
        self._require_same_kind(other)
        return self.__class__(pointwise_max(self._lookup, other._lookup))

    def _require_same_kind(self, other: object) -> None:
        if not isinstance(other, self.__class__):
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Actor]:
        return iter(actor for actor, _ in self.entries)

    def __contains__(self, actor: object) -> bool:
        return actor in self._lookup

    def __str__(self) -> str:
        return format_entries(self.entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
