# utils/session_reader.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# CSV session reader and replayer for key-value store client sessions

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from core import ClockError, VersionVector
from kvstore import KVStore
from notation import ParseError, parse_version_vector
from utils.logger import get_logger

ACTORS_DIRECTIVE = "# actors:"
REQUIRED_HEADERS = {"client", "op", "key", "value", "context"}
OPERATIONS = {"get", "put"}


class SessionFormatError(Exception):
    """Exception raised when session files contain invalid format or data."""

    pass


@dataclass(frozen=True)
class SessionStep:
    """One client operation read from a session file.

    Attributes:
        row: 1-based line number of the step in the file
        client: Client actor performing the operation
        op: Either "get" or "put"
        key: Key operated on
        value: Value to write (None for reads)
        context: Explicit write context, or None to use the client's last read
    """

    row: int
    client: str
    op: str
    key: str
    value: Any = None
    context: Optional[VersionVector] = None


def read_session(filepath: str) -> Iterator[SessionStep]:
    """Read client steps from a CSV session file.

    Expected CSV format:
        # actors: A|B|C
        client,op,key,value,context
        A,get,x,,
        A,put,x,10,
        B,put,x,15,[A:1]

    The actors directive on the first line is optional.

    Args:
        filepath: Path to the CSV session file

    Yields:
        SessionStep: Parsed steps in file order

    Raises:
        SessionFormatError: If file format is invalid or a step cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise SessionFormatError(f"Session file not found: {filepath}")

    logger.debug(f"Reading session file: {filepath}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as file:
            first_line = file.readline().strip()
            row_offset = 1
            if not first_line.startswith(ACTORS_DIRECTIVE):
                file.seek(0)
                row_offset = 0

            reader = csv.DictReader(file)

            if not REQUIRED_HEADERS.issubset(set(reader.fieldnames or [])):
                missing = REQUIRED_HEADERS - set(reader.fieldnames or [])
                raise SessionFormatError(f"Missing required headers: {sorted(missing)}")

            for row_num, row in enumerate(reader, start=2 + row_offset):
                try:
                    step = _parse_step_row(row_num, row)
                except (SessionFormatError, ParseError, ClockError) as e:
                    raise SessionFormatError(f"Error parsing row {row_num}: {e}") from e
                logger.debug(f"Parsed {step.op} by {step.client} from row {row_num}")
                yield step

    except OSError as e:
        raise SessionFormatError(f"Cannot open session file: {filepath}") from e
    except csv.Error as e:
        raise SessionFormatError(f"Error reading session file: {e}") from e


def get_declared_actors(filepath: str) -> List[str]:
    """Extract the actor list from the optional first-line directive.

    Args:
        filepath: Path to the session file

    Returns:
        List of actor names, empty if no directive found
    """
    path = Path(filepath)

    if not path.exists():
        return []

    with open(path, "r", encoding="utf-8") as file:
        first_line = file.readline().strip()

    if not first_line.startswith(ACTORS_DIRECTIVE):
        return []

    actors_str = first_line[len(ACTORS_DIRECTIVE) :].strip()
    actors = [a.strip() for a in actors_str.split("|") if a.strip()]
    get_logger().debug(f"Found actors directive: {actors}")
    return actors


def validate_session_file(filepath: str) -> int:
    """Validate a session file by parsing every step.

    Args:
        filepath: Path to the session file to validate

    Returns:
        Number of steps in the file

    Raises:
        SessionFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating session file: {filepath}")

    steps = list(read_session(filepath))
    declared = get_declared_actors(filepath)
    if declared:
        unknown = sorted({step.client for step in steps} - set(declared))
        if unknown:
            raise SessionFormatError(f"Clients not declared in actors directive: {unknown}")

    logger.debug(f"Session validation successful: {len(steps)} steps")
    return len(steps)


def replay_session(
    filepath: str, store: Optional[KVStore] = None, verbose: bool = False
) -> KVStore:
    """Run every step of a session file against a store.

    A ``get`` remembers the returned context as the client's last read.
    A ``put`` writes with the step's explicit context when present, else the
    client's last read context, else an empty vector.

    Args:
        filepath: Path to the session file
        store: Store to write into; a fresh one is created when omitted
        verbose: Report every step at INFO instead of DEBUG

    Returns:
        The store after all steps

    Raises:
        SessionFormatError: If the file cannot be parsed
    """
    logger = get_logger()
    report = logger.info if verbose else logger.debug
    store = store if store is not None else KVStore()
    last_read: Dict[str, VersionVector] = {}

    for step in read_session(filepath):
        if step.op == "get":
            result = store.get(step.key)
            last_read[step.client] = result.context
            report(
                f"  {step.client} read {step.key!r}: "
                f"{[str(v) for v in result.values]} context={result.context}"
            )
            continue

        context = step.context
        if context is None:
            context = last_read.get(step.client, VersionVector.new())
        stored = store.put(step.client, context, step.key, step.value)
        report(f"  {step.client} put {step.key!r} = {stored} with context {context}")

    return store


def _parse_step_row(row_num: int, row: dict) -> SessionStep:
    """Parse a single CSV row into a SessionStep.

    Raises:
        SessionFormatError: If row data is invalid
    """
    client = (row["client"] or "").strip()
    if not client:
        raise SessionFormatError("Empty client field")

    op = (row["op"] or "").strip().lower()
    if op not in OPERATIONS:
        raise SessionFormatError(f"Unknown operation: {row['op']!r}")

    key = (row["key"] or "").strip()
    if not key:
        raise SessionFormatError("Empty key field")

    value = None
    context = None
    if op == "put":
        value = _parse_value(row["value"] or "")
        context_str = (row["context"] or "").strip()
        if context_str:
            context = parse_version_vector(context_str)

    return SessionStep(
        row=row_num, client=client, op=op, key=key, value=value, context=context
    )


def _parse_value(value_str: str) -> Any:
    """Parse a written value: ints become int, anything else stays a string.

    Raises:
        SessionFormatError: If the value is empty
    """
    value_str = value_str.strip()
    if not value_str:
        raise SessionFormatError("Empty value for put")

    try:
        return int(value_str)
    except ValueError:
        return value_str
