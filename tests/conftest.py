# tests/conftest.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for LogicalClock tests.

The configuration handles:
- Python path setup for module imports
- Builders for clocks described as increment sequences
- Session file fixtures for store replay tests
"""

import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core import VectorClock, VersionVector  # noqa: E402


def build(cls, *actors):
    """Build a clock of type cls by incrementing each actor in order."""
    clock = cls.new()
    for actor in actors:
        clock = clock.increment(actor)
    return clock


@pytest.fixture
def sample_actors():
    """Provide standard actor set for testing.

    Returns:
        List[str]: Common actor identifiers for test scenarios
    """
    return ["A", "B", "C"]


@pytest.fixture
def vc():
    """Builder for vector clocks from increment sequences."""
    return lambda *actors: build(VectorClock, *actors)


@pytest.fixture
def vv():
    """Builder for version vectors from increment sequences."""
    return lambda *actors: build(VersionVector, *actors)


# Store scenario: two concurrent blind writes, a dominating write, then a
# write carrying a stale empty context.
STORE_SCENARIO = """\
# actors: A|B|C
client,op,key,value,context
A,get,x,,
B,get,x,,
A,put,x,10,
B,put,x,15,
C,get,x,,
C,put,x,20,
B,put,x,30,
"""


@pytest.fixture
def write_session(tmp_path):
    """Write session text to a temporary CSV and return its path as str."""

    def _write(text: str, name: str = "session.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def store_scenario_file(write_session):
    """Path to a session file replaying the sibling store scenario."""
    return write_session(STORE_SCENARIO)
