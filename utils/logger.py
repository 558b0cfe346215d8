# utils/logger.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Logging utility for clock comparisons and store replays with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for clock tooling."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ClockLogger:
    """Centralized logger for clock tooling with structured output."""

    def __init__(self, name: str = "logical_clock", level: LogLevel = LogLevel.INFO):
        """Initialize the clock logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ClockFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for store writes and clock comparisons
    def write_applied(
        self, actor: str, key: str, mode: str, dot: str, sibling_count: int
    ):
        """Log the outcome of a store write."""
        self.debug(
            f"    ✏️  {actor} wrote {key!r} ({mode}) dot={dot} → {sibling_count} sibling(s)"
        )

    def context_merged(self, key: str, local: str, context: str, frontier: str):
        """Log a merge of the store vector with a stale request context."""
        self.debug(f"    🔀 {key!r}: {local} ⊔ {context} → {frontier}")

    def sibling_pruned(self, key: str, value: str, dot: str, by_dot: str):
        """Log a sibling superseded by a newer write."""
        self.debug(f"      🗑️  {key!r}: dropped {value} at {dot}, superseded by {by_dot}")

    def sibling_kept(self, key: str, value: str, dot: str):
        """Log a sibling retained as concurrent."""
        self.debug(f"      🟰 {key!r}: kept concurrent {value} at {dot}")

    def comparison(self, left: str, right: str, relation: str, merged: str):
        """Log the relation between two clocks."""
        self.info(f"{left} vs {right} → {relation}")
        self.info(f"merge: {merged}")

    def key_state(self, key: str, siblings: str):
        """Log the final siblings of one key."""
        self.info(f"  {key}: {siblings}")

    def final_vector(self, vector: str):
        """Log the store vector after a replay."""
        self.info(f"\n>>> STORE VECTOR: {vector} <<<")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.info(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class ClockFormatter(logging.Formatter):
    """Custom formatter with clean output for clock tooling."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ClockLogger] = None


def get_logger(name: str = "logical_clock") -> ClockLogger:
    """Get or create the global clock logger instance.

    Args:
        name: Logger name (default: "logical_clock")

    Returns:
        ClockLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ClockLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)

