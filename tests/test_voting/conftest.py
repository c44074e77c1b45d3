"""Shared fixtures for voting system tests."""

import pytest
from tests.conftest import make_ballots


@pytest.fixture
def remaining_majority():
    """Dataset 1: 0 keeps a majority of the ballots still counted.

    Round 1: 0=2, 1=1, 2=1, 3=1. Eliminate 1, 2, 3 together; their second
    choices are among themselves, so all three ballots exhaust.
    Round 2: 0=2 of 2. 0 wins.
    """
    return [[0], [0], [2, 1], [3, 2], [1, 3]]


@pytest.fixture
def first_round_absentee():
    """Dataset 2: 4 is everyone's fallback but nobody's first choice.

    4 never enters the count, so the ballots of 1, 2, 3 exhaust. 0 wins.
    """
    return [[0, 4], [0, 4], [1, 4], [2, 4], [3, 4]]


@pytest.fixture
def exact_half():
    """Dataset 3: 0 holds exactly half of round 1, which is not a majority.

    Round 1: 0=3, 1=2, 2=1 of 6. Eliminate 2, its ballot moves to 1.
    Round 2: 0=3, 1=3. Tie.
    """
    return [[0], [0], [0], [1], [1], [2, 1]]


@pytest.fixture
def two_eliminations():
    """Dataset 4: a vote reaches 0 through two eliminated candidates.

    Round 1: 0=2, 4=2, 1=1. Eliminate 1; 2 was never counted, so the
    ballot skips to 0. Round 2: 0=3 of 5. 0 wins.
    """
    return [[0], [0], [1, 2, 0], [4], [4]]


@pytest.fixture
def many_way_delayed_tie():
    """Dataset 5: a five-way tie appears only after elimination.

    Round 1: 0..3=3 each, 4=2, 5=1, 6=1. Eliminate 5 and 6 together: the
    5 ballot moves to 4, the 6 ballot finds 5 already gone and exhausts.
    Round 2: 0..4=3 each. Tie.
    """
    return make_ballots([
        (3, [0]),
        (3, [1]),
        (3, [2]),
        (3, [3]),
        (2, [4]),
        (1, [5, 4]),
        (1, [6, 5]),
    ])


@pytest.fixture
def named_candidates():
    """Dataset 6: string candidates.

    Round 1: Alice=2, Bob=2, Carol=1. Eliminate Carol; Dave never counted,
    so her ballot moves to Alice. Round 2: Alice=3 of 5. Alice wins.
    """
    return make_ballots([
        (2, ["Alice"]),
        (1, ["Carol", "Dave", "Alice"]),
        (2, ["Bob"]),
    ])
