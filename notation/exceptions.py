# notation/exceptions.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Custom exceptions for clock notation parsing

"""Domain-specific exceptions for clock notation processing."""


class ParseError(RuntimeError):
    """Exception raised when clock notation cannot be parsed.

    Covers illegal characters, malformed entries, empty input and actors
    listed more than once. Counter range problems are reported by the core
    as ``InvalidCounterError`` instead.
    """

    pass
