#!/usr/bin/env python3
# run_clocks.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Command-line interface for clock comparison and store session replay

import sys
import argparse
from pathlib import Path

from core import ClockError, VectorClock, VersionVector
from kvstore import KVStore
from notation import ParseError, parse_vector_clock, parse_version_vector
from utils.logger import LogLevel, get_logger, set_log_level
from utils.session_reader import (
    SessionFormatError,
    get_declared_actors,
    replay_session,
    validate_session_file,
)


def configure_logging_for_cli(debug: bool = False) -> None:
    """Configure logging levels for the CLI.

    Results are reported at INFO, so INFO stays on unless debugging.

    Args:
        debug: Enable DEBUG level logging
    """
    set_log_level(LogLevel.DEBUG if debug else LogLevel.INFO)


def vector_clock_relation(left: VectorClock, right: VectorClock) -> str:
    """Classify two vector clocks as before, after, equal or concurrent."""
    if left == right:
        return "equal"
    if left.happened_before(right):
        return "before"
    if right.happened_before(left):
        return "after"
    return "concurrent"


def version_vector_relation(left: VersionVector, right: VersionVector) -> str:
    """Classify two version vectors as descends, descended-by, equal or concurrent."""
    if left == right:
        return "equal"
    if left.descends(right):
        return "descends"
    if right.descends(left):
        return "descended-by"
    return "concurrent"


def run_compare(left_text: str, right_text: str, kind: str) -> str:
    """Parse two clocks, log their relation and merge.

    Returns:
        The relation name

    Raises:
        ParseError: If either clock is malformed
        ClockError: If a counter is out of range
    """
    if kind == "version":
        left = parse_version_vector(left_text)
        right = parse_version_vector(right_text)
        relation = version_vector_relation(left, right)
    else:
        left = parse_vector_clock(left_text)
        right = parse_vector_clock(right_text)
        relation = vector_clock_relation(left, right)

    get_logger().comparison(str(left), str(right), relation, str(left.merge(right)))
    return relation


def print_store_state(store: KVStore) -> None:
    """Log every key's siblings and the final store vector."""
    logger = get_logger()

    logger.info(f"\n📊 Keys stored: {len(store)}")
    for key in store:
        siblings = ", ".join(str(value) for value in store.siblings(key))
        logger.key_state(key, f"[{siblings}]")

    logger.final_vector(str(store.vector))


def run_replay(session: Path, validate_only: bool, verbose: bool = False) -> KVStore:
    """Validate a session file and, unless asked not to, replay it.

    Returns:
        The store after replay, or an empty store with validate_only

    Raises:
        SessionFormatError: If the session file is invalid
    """
    logger = get_logger()

    logger.info(f"🔍 Validating session file: {session}")
    step_count = validate_session_file(str(session))

    actors = get_declared_actors(str(session))
    if actors:
        logger.info(f"Declared actors: {', '.join(actors)}")

    if validate_only:
        logger.validation_result(True, f"Session validation successful ({step_count} steps)")
        return KVStore()

    store = replay_session(str(session), verbose=verbose)
    print_store_state(store)
    return store


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="LogicalClock causality tracking tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_clocks.py compare "[A:2, B:3, C:2]" "[A:2, B:4, C:2]"
  python run_clocks.py compare "[A:2, B:3]" "[A:3, B:2]" --kind version
  python run_clocks.py replay -t session.csv
  python run_clocks.py replay -t session.csv --debug
  python run_clocks.py replay -t session.csv --validate-only

Session file format:
  # actors: A|B|C
  client,op,key,value,context
  A,get,x,,
  A,put,x,10,
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report every replayed step at INFO (log level unchanged)",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Compare two clocks")
    compare.add_argument("left", help="Left clock, e.g. '[A:1, B:2]'")
    compare.add_argument("right", help="Right clock")
    compare.add_argument(
        "--kind",
        choices=["vector", "version"],
        default="vector",
        help="Compare as vector clocks (happened-before) or version vectors (descends)",
    )

    replay = subparsers.add_parser("replay", help="Replay a store session file")
    replay.add_argument(
        "-t", "--trace", required=True, type=Path, help="Path to CSV session file"
    )
    replay.add_argument(
        "--validate-only", action="store_true", help="Only validate session file format"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the clock tools.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_cli(debug=args.debug)
    logger = get_logger()

    try:
        if args.command == "compare":
            run_compare(args.left, args.right, args.kind)
        else:
            run_replay(args.trace, args.validate_only, verbose=args.verbose)
        return 0

    except SessionFormatError as e:
        logger.error(f"Session file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Clock parsing error: {e}")
        return 2

    except ClockError as e:
        logger.error(f"Clock error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
