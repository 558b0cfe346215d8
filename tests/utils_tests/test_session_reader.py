# tests/utils_tests/test_session_reader.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Tests for CSV session parsing, validation and replay

"""Session file reading, validation and replay against KVStore."""

import pytest

from core import VersionVector
from kvstore import KVStore
from utils.session_reader import (
    SessionFormatError,
    SessionStep,
    get_declared_actors,
    read_session,
    replay_session,
    validate_session_file,
)

HEADER = "client,op,key,value,context\n"


class TestReadSession:
    """Parsing rows into SessionStep records."""

    def test_reads_store_scenario(self, store_scenario_file):
        steps = list(read_session(store_scenario_file))
        assert len(steps) == 7
        assert steps[0] == SessionStep(row=3, client="A", op="get", key="x")
        assert steps[2].op == "put"
        assert steps[2].value == 10
        assert steps[2].context is None

    def test_rows_without_directive(self, write_session):
        path = write_session(HEADER + "A,put,k,1,\n")
        (step,) = read_session(path)
        assert step.row == 2

    def test_explicit_context(self, write_session):
        path = write_session(HEADER + 'B,put,k,7,"[A:1, B:2]"\n')
        (step,) = read_session(path)
        assert step.context == VersionVector({"A": 1, "B": 2})

    def test_string_values_kept(self, write_session):
        path = write_session(HEADER + "A,put,cart,apple,\n")
        (step,) = read_session(path)
        assert step.value == "apple"

    def test_op_is_case_insensitive(self, write_session):
        path = write_session(HEADER + "A,GET,k,,\n")
        (step,) = read_session(path)
        assert step.op == "get"

    def test_get_ignores_value_and_context(self, write_session):
        path = write_session(HEADER + "A,get,k,5,[A:1]\n")
        (step,) = read_session(path)
        assert step.value is None
        assert step.context is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(SessionFormatError, match="not found"):
            list(read_session(str(tmp_path / "absent.csv")))

    def test_missing_headers(self, write_session):
        path = write_session("client,op,key\nA,get,k\n")
        with pytest.raises(SessionFormatError, match="Missing required headers"):
            list(read_session(path))

    @pytest.mark.parametrize(
        "row, message",
        [
            (",get,k,,", "Empty client"),
            ("A,delete,k,,", "Unknown operation"),
            ("A,get,,,", "Empty key"),
            ("A,put,k,,", "Empty value"),
            ("A,put,k,1,[A:", "Syntax error"),
            ("A,put,k,1,[A:x]", "Syntax error"),
        ],
    )
    def test_invalid_rows(self, write_session, row, message):
        path = write_session(HEADER + row + "\n")
        with pytest.raises(SessionFormatError, match=message) as exc_info:
            list(read_session(path))
        assert "row 2" in str(exc_info.value)


class TestDeclaredActors:
    def test_directive(self, store_scenario_file):
        assert get_declared_actors(store_scenario_file) == ["A", "B", "C"]

    def test_no_directive(self, write_session):
        assert get_declared_actors(write_session(HEADER)) == []

    def test_missing_file(self, tmp_path):
        assert get_declared_actors(str(tmp_path / "absent.csv")) == []


class TestValidateSession:
    def test_valid_file(self, store_scenario_file):
        assert validate_session_file(store_scenario_file) == 7

    def test_undeclared_client(self, write_session):
        path = write_session("# actors: A\n" + HEADER + "A,get,k,,\nB,get,k,,\n")
        with pytest.raises(SessionFormatError, match="not declared"):
            validate_session_file(path)


class TestReplaySession:
    def test_store_scenario_sibling_counts(self, store_scenario_file):
        store = replay_session(store_scenario_file)
        siblings = store.siblings("x")
        assert sorted(stored.value for stored in siblings) == [20, 30]
        assert store.vector == VersionVector({"A": 1, "B": 2, "C": 1})

    def test_replay_prefix_keeps_two_siblings(self, write_session):
        path = write_session(
            HEADER + "A,get,x,,\nB,get,x,,\nA,put,x,10,\nB,put,x,15,\n"
        )
        store = replay_session(path)
        assert len(store.siblings("x")) == 2

    def test_replay_with_reconciling_write(self, write_session):
        path = write_session(
            HEADER
            + "A,put,x,10,\nB,put,x,15,\nC,get,x,,\nC,put,x,20,\n"
        )
        store = replay_session(path, verbose=True)
        assert [stored.value for stored in store.siblings("x")] == [20]

    def test_explicit_context_overrides_last_read(self, write_session):
        path = write_session(
            HEADER + "A,put,x,1,\nB,get,x,,\nB,put,x,2,[]\n"
        )
        store = replay_session(path)
        # The explicit empty context is stale: both values survive
        assert sorted(stored.value for stored in store.siblings("x")) == [1, 2]

    def test_replay_into_existing_store(self, write_session):
        store = KVStore()
        store.put("Z", VersionVector.new(), "other", 1)
        path = write_session(HEADER + "A,get,x,,\nA,put,x,5,\n")
        returned = replay_session(path, store=store)
        assert returned is store
        assert store.keys() == ["other", "x"]
