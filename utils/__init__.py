# utils/__init__.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Utility module exports
#
# The session reader depends on kvstore, which logs through this package,
# so it is imported explicitly as utils.session_reader.

from .logger import (
    ClockLogger,
    LogLevel,
    get_logger,
    set_log_level,
)

__all__ = [
    "ClockLogger",
    "LogLevel",
    "get_logger",
    "set_log_level",
]
