"""Tests for voter registration."""

import pytest
from tests.conftest import ADMIN

from ballot import AuthorizationFailure, Ballot, DuplicateRegistration, PhaseViolation, WorkflowStatus
from ballot.events import VoterRegistered
from ballot.registry import VoterRegistry


class TestVoterRegistry:
    def test_register(self):
        registry = VoterRegistry()
        events = registry.register("alice")
        assert events == [VoterRegistered(voter="alice")]
        assert registry.registered_voters == 1
        assert registry.is_registered("alice")
        assert registry.get("alice").registered is True

    def test_duplicate(self):
        registry = VoterRegistry()
        registry.register("alice")
        with pytest.raises(DuplicateRegistration):
            registry.register("alice")
        assert registry.registered_voters == 1

    def test_unknown_voter_is_unregistered_default(self):
        registry = VoterRegistry()
        voter = registry.get("nobody")
        assert voter.registered is False
        assert voter.has_voted is False
        assert not registry.is_registered("nobody")

    def test_get_returns_copy(self):
        registry = VoterRegistry()
        registry.register("alice")
        registry.get("alice").has_voted = True
        assert registry.get("alice").has_voted is False


class TestRegisterVoter:
    def setup_method(self):
        self.ballot = Ballot(ADMIN)

    def test_success(self):
        outcome = self.ballot.register_voter(ADMIN, "alice")
        assert outcome.value == "alice"
        assert outcome.events == [VoterRegistered(voter="alice")]
        assert self.ballot.registered_voters == 1
        assert list(self.ballot.events) == [VoterRegistered(voter="alice")]

    def test_non_admin_rejected(self):
        with pytest.raises(AuthorizationFailure):
            self.ballot.register_voter("alice", "alice")
        assert self.ballot.registered_voters == 0
        assert len(self.ballot.events) == 0

    def test_duplicate_rejected_without_event(self):
        self.ballot.register_voter(ADMIN, "alice")
        with pytest.raises(DuplicateRegistration):
            self.ballot.register_voter(ADMIN, "alice")
        assert self.ballot.registered_voters == 1
        assert len(self.ballot.events) == 1

    def test_closed_after_proposals_start(self):
        self.ballot.start_proposal_registration(ADMIN)
        with pytest.raises(PhaseViolation) as exc_info:
            self.ballot.register_voter(ADMIN, "bob")
        assert exc_info.value.expected == WorkflowStatus.RegisteringVoters
        assert exc_info.value.actual == WorkflowStatus.ProposalsRegistrationStarted
        assert self.ballot.registered_voters == 0

    def test_administrator_predicate(self):
        ballot = Ballot(lambda caller: caller.startswith("root"))
        ballot.register_voter("root-1", "alice")
        assert ballot.is_administrator("root-2")
        assert not ballot.is_administrator("alice")
        with pytest.raises(AuthorizationFailure):
            ballot.register_voter("alice", "bob")

    def test_administrator_can_also_be_a_voter(self):
        self.ballot.register_voter(ADMIN, ADMIN)
        self.ballot.start_proposal_registration(ADMIN)
        outcome = self.ballot.register_proposal(ADMIN, "X")
        assert outcome.value == 1

    def test_many_voters_counted_past_255(self):
        """Counters are plain ints, so there is no 8-bit ceiling."""
        for i in range(300):
            self.ballot.register_voter(ADMIN, f"voter-{i}")
        assert self.ballot.registered_voters == 300
