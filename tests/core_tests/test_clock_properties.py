# tests/core_tests/test_clock_properties.py
# This file is part of LogicalClock - Causality Tracking Primitives
#
# Algebraic properties of happened-before, descends and merge

"""Order and semilattice laws checked over a fixed pool of clocks.

The pool mixes empty clocks, single-actor clocks, ordered chains and
concurrent pairs, with and without overlapping actors.
"""

import itertools

import pytest

from core import VectorClock, VersionVector

POOL = [
    {},
    {"A": 1},
    {"A": 2},
    {"B": 1},
    {"A": 1, "B": 1},
    {"A": 2, "B": 3, "C": 2},
    {"A": 2, "B": 4, "C": 2},
    {"A": 1, "B": 4, "C": 1},
    {"A": 3, "B": 2, "C": 1},
    {1: 2, "A": 1},
]

PAIRS = list(itertools.product(range(len(POOL)), repeat=2))
TRIPLES = list(itertools.product(range(0, len(POOL), 2), repeat=3))


class TestVectorClockOrderLaws:
    @pytest.mark.parametrize("i", range(len(POOL)))
    def test_irreflexive(self, i):
        clock = VectorClock(POOL[i])
        assert not clock.happened_before(clock)

    @pytest.mark.parametrize("i, j", PAIRS)
    def test_antisymmetric(self, i, j):
        a, b = VectorClock(POOL[i]), VectorClock(POOL[j])
        assert not (a.happened_before(b) and b.happened_before(a))

    @pytest.mark.parametrize("i, j", PAIRS)
    def test_concurrency_is_symmetric(self, i, j):
        a, b = VectorClock(POOL[i]), VectorClock(POOL[j])
        assert a.concurrent(b) == b.concurrent(a)

    @pytest.mark.parametrize("i", range(len(POOL)))
    @pytest.mark.parametrize("actor", ["A", "Z", 1])
    def test_increment_happens_after(self, i, actor):
        clock = VectorClock(POOL[i])
        assert clock.happened_before(clock.increment(actor))


class TestVersionVectorLaws:
    @pytest.mark.parametrize("i", range(len(POOL)))
    def test_descends_reflexive(self, i):
        vector = VersionVector(POOL[i])
        assert vector.descends(vector)

    @pytest.mark.parametrize("i", range(len(POOL)))
    def test_merge_idempotent(self, i):
        vector = VersionVector(POOL[i])
        assert vector.merge(vector) == vector

    @pytest.mark.parametrize("i, j", PAIRS)
    def test_merge_commutative(self, i, j):
        a, b = VersionVector(POOL[i]), VersionVector(POOL[j])
        assert a.merge(b) == b.merge(a)

    @pytest.mark.parametrize("i, j, k", TRIPLES)
    def test_merge_associative(self, i, j, k):
        a, b, c = VersionVector(POOL[i]), VersionVector(POOL[j]), VersionVector(POOL[k])
        assert a.merge(b).merge(c) == a.merge(b.merge(c))

    @pytest.mark.parametrize("i, j", PAIRS)
    def test_merge_descends_both(self, i, j):
        a, b = VersionVector(POOL[i]), VersionVector(POOL[j])
        merged = a.merge(b)
        assert merged.descends(a)
        assert merged.descends(b)

    @pytest.mark.parametrize("i", range(len(POOL)))
    @pytest.mark.parametrize("actor", ["A", "Z", 1])
    def test_increment_monotonic(self, i, actor):
        vector = VersionVector(POOL[i])
        advanced = vector.increment(actor)
        assert advanced.descends(vector)
        assert not vector.descends(advanced)

    @pytest.mark.parametrize("i, j", PAIRS)
    def test_descends_both_ways_means_equal(self, i, j):
        a, b = VersionVector(POOL[i]), VersionVector(POOL[j])
        if a.descends(b) and b.descends(a):
            assert a == b
