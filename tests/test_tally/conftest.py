"""Shared fixtures for tally tests."""

import pytest

from ballot.models import Proposal


def make_proposals(counts: list[int]) -> list[Proposal]:
    """Proposals named Blank, P1, P2, ... with the given vote counts."""
    names = ["Blank"] + [f"P{i}" for i in range(1, len(counts))]
    return [Proposal(description=name, vote_count=c) for name, c in zip(names, counts)]


@pytest.fixture
def clear_leader():
    """Blank=0, P1=2, P2=1. P1 leads alone."""
    return make_proposals([0, 2, 1])


@pytest.fixture
def two_way_tie():
    """Blank=1, P1=3, P2=0, P3=3. P1 and P3 tie at the top."""
    return make_proposals([1, 3, 0, 3])


@pytest.fixture
def blank_ties_leader():
    """Blank=2, P1=2. The blank proposal shares the lead."""
    return make_proposals([2, 2])
