# core/exceptions.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Error taxonomy for clock and version vector operations

"""Domain-specific exceptions for causality tracking primitives.

Comparisons and merges are total and never raise for well-formed operands.
The only failure intrinsic to the algebra is a counter exceeding its bound
on increment; the remaining errors guard construction from raw mappings.
"""


class ClockError(Exception):
    """Base class for all clock and version vector errors."""

    pass


class CounterOverflowError(ClockError, OverflowError):
    """Raised when an increment would push a counter past ``MAX_COUNTER``.

    Counters never wrap around: a wrapped counter would make a newer event
    look older than its ancestors and corrupt every dominance check.
    """

    pass


class InvalidCounterError(ClockError, ValueError):
    """Raised when a counter is not a non-negative integer within bounds."""

    pass


class InvalidActorError(ClockError, TypeError):
    """Raised when an actor identifier is neither a string nor an integer."""

    pass
