# notation/__init__.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Clock notation parsing into vector clocks and version vectors

"""Textual notation for actor-to-counter maps.

A clock is written as a bracketed list of ``actor:counter`` entries, for
example ``[A:2, B:3, C:2]``. Braces are accepted in place of brackets and
``;`` in place of ``,``. Actors are identifiers or non-negative integers;
numeric actors parse to ``int``. Other actor names are double-quoted, with
``\\"`` and ``\\\\`` escapes. The ``str()`` of any clock parses back to an
equal clock.

Core Functions:
    parse_counters: Notation to a plain ``dict``
    parse_vector_clock: Notation to a :class:`core.VectorClock`
    parse_version_vector: Notation to a :class:`core.VersionVector`

Example:
    >>> from notation import parse_vector_clock
    >>> parse_vector_clock("[A:2, B:3]").get("B")
    3
"""

from typing import Dict

from core import Actor, VectorClock, VersionVector
from .exceptions import ParseError
from .grammar import _ClockParser
from utils.logger import get_logger


def parse_counters(source: str) -> Dict[Actor, int]:
    """Parse clock notation into an actor-to-counter dictionary.

    Uses a fresh parser instance per call so parsing holds no shared state.

    Args:
        source: Clock notation string

    Returns:
        Dictionary in source order, zero entries included

    Raises:
        ParseError: Notation is malformed or lists an actor twice
    """
    counters: Dict[Actor, int] = {}
    for actor, counter in _ClockParser().parse(source):
        if actor in counters:
            raise ParseError(f"Actor {actor!r} appears more than once in {source!r}")
        counters[actor] = counter
    return counters


def parse_vector_clock(source: str) -> VectorClock:
    """Parse clock notation into a VectorClock.

    Raises:
        ParseError: Notation is malformed
        InvalidCounterError: A counter exceeds MAX_COUNTER
    """
    clock = VectorClock(parse_counters(source))
    get_logger().debug(f"Parsed vector clock {clock}")
    return clock


def parse_version_vector(source: str) -> VersionVector:
    """Parse clock notation into a VersionVector.

    Raises:
        ParseError: Notation is malformed
        InvalidCounterError: A counter exceeds MAX_COUNTER
    """
    vector = VersionVector(parse_counters(source))
    get_logger().debug(f"Parsed version vector {vector}")
    return vector


__all__ = ["parse_counters", "parse_vector_clock", "parse_version_vector", "ParseError"]
