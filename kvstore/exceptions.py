# kvstore/exceptions.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Exceptions raised by the sample key-value store


class KeyNotFoundError(KeyError):
    """Raised when siblings are requested for a key that was never written."""

    pass
