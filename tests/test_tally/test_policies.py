"""Tests for tie policies and their registry."""

import pytest
from tests.test_tally.conftest import make_proposals

from ballot.config import ConfigError
from ballot.tally import get_all_tie_policies, get_tie_policy
from ballot.tally.first_max import FirstMaxPolicy
from ballot.tally.tie_preserving import TiePreservingPolicy


class TestRegistry:
    def test_both_policies_registered(self):
        assert {p.key for p in get_all_tie_policies()} == {"first", "all"}

    def test_lookup(self):
        assert isinstance(get_tie_policy("first"), FirstMaxPolicy)
        assert isinstance(get_tie_policy("all"), TiePreservingPolicy)

    def test_unknown(self):
        with pytest.raises(ConfigError, match="Unknown tie policy"):
            get_tie_policy("random")

    def test_descriptions(self):
        for policy in get_all_tie_policies():
            assert policy.description


class TestFirstMaxPolicy:
    def setup_method(self):
        self.policy = FirstMaxPolicy()

    def test_clear_leader(self, clear_leader):
        assert self.policy.select(clear_leader, 2) == [1]

    def test_tie_picks_lowest_index(self, two_way_tie):
        assert self.policy.select(two_way_tie, 3) == [1]

    def test_blank_wins_its_ties(self, blank_ties_leader):
        assert self.policy.select(blank_ties_leader, 2) == [0]

    def test_all_zero(self):
        assert self.policy.select(make_proposals([0, 0, 0]), 0) == [0]

    def test_highest_not_present(self, clear_leader):
        with pytest.raises(ValueError):
            self.policy.select(clear_leader, 5)


class TestTiePreservingPolicy:
    def setup_method(self):
        self.policy = TiePreservingPolicy()

    def test_clear_leader(self, clear_leader):
        assert self.policy.select(clear_leader, 2) == [1]

    def test_tie_keeps_everyone(self, two_way_tie):
        assert self.policy.select(two_way_tie, 3) == [1, 3]

    def test_blank_in_tie(self, blank_ties_leader):
        assert self.policy.select(blank_ties_leader, 2) == [0, 1]

    def test_highest_not_present(self, clear_leader):
        with pytest.raises(ValueError):
            self.policy.select(clear_leader, 5)
