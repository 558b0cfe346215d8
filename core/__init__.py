# core/__init__.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Core module public API for causality tracking value types

"""Causality tracking primitives for distributed systems.

This module provides immutable value types that order events originating at
different actors (nodes, processes, replicas) without synchronized wall
clocks. Every operation is a pure function returning a new value, so
instances can be shared freely between threads.

Primary Components:
    VectorClock: Strict happened-before partial order over event snapshots
    VersionVector: Non-strict ``descends`` dominance over a datum's history
    Dot: Single update identifier read out of a version vector
    MAX_COUNTER: Upper bound for any counter; exceeding it raises

Example:
    >>> from core import VectorClock, VersionVector
    >>> a = VectorClock.new().increment("A")
    >>> a.happened_before(a.increment("B"))
    True
    >>> vv = VersionVector.new().increment("A")
    >>> vv.descends(vv.get_dot("A"))
    True
"""

from .counters import MAX_COUNTER, Actor
from .exceptions import (
    ClockError,
    CounterOverflowError,
    InvalidActorError,
    InvalidCounterError,
)
from .vector_clock import VectorClock
from .version_vector import Dot, VersionVector

__all__ = [
    "Actor",
    "MAX_COUNTER",
    "VectorClock",
    "VersionVector",
    "Dot",
    "ClockError",
    "CounterOverflowError",
    "InvalidActorError",
    "InvalidCounterError",
]

__version__ = "1.0.0"
__description__ = "Vector clocks, version vectors and dots"
