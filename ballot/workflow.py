"""Workflow controller: the ballot aggregate and its phase state machine."""

import functools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from ballot.ballot_box import BallotBox
from ballot.config import BallotConfig
from ballot.errors import (
    AuthorizationFailure,
    BallotError,
    NotEnoughProposals,
    PhaseViolation,
    QuorumParameterOutOfRange,
)
from ballot.events import Event, EventLog, WorkflowStatusChange
from ballot.models import Proposal, TallyResult, Voter, WorkflowStatus
from ballot.proposals import ProposalBook
from ballot.registry import VoterRegistry
from ballot.tally.engine import TallyEngine

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """What an accepted operation returns: its value and the notifications it emitted."""
    value: Any = None
    events: list[Event] = field(default_factory=list)


def _operation(method):
    """Run a ballot method under the ballot lock and log rejections."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            try:
                return method(self, *args, **kwargs)
            except BallotError as e:
                logger.warning("%s rejected: %s", method.__name__, e)
                raise
    return wrapper


class Ballot:
    """A single ballot run, from voter registration to the published winner.

    The ballot owns the whitelist, the proposals, the ballot box and the
    current status. Every operation runs under one lock and checks all of
    its preconditions (role, then phase, then arguments) before mutating
    anything, so a rejected operation leaves no trace.

    Args:
        administrator: Either the administrator's identity, or a predicate
            telling whether a caller is the administrator
        config: Tie, gating and minimum-proposal policies
    """

    def __init__(
        self,
        administrator: str | Callable[[str], bool],
        config: BallotConfig | None = None,
    ):
        if callable(administrator):
            self._is_administrator = administrator
        else:
            self._is_administrator = lambda caller: caller == administrator
        self.config = config or BallotConfig()
        self._engine = TallyEngine(self.config)
        self._lock = threading.RLock()

        self._status = WorkflowStatus.RegisteringVoters
        self._registry = VoterRegistry()
        self._book = ProposalBook()
        self._box = BallotBox(self._registry, self._book)
        self._voting_quorum = 0
        self._winning_quorum = 0
        self._result: TallyResult | None = None
        self.events = EventLog()

    # ------------------------------------------------------------------
    # Preconditions
    # ------------------------------------------------------------------

    def _require_administrator(self, caller: str) -> None:
        if not self._is_administrator(caller):
            raise AuthorizationFailure(f"{caller!r} is not the administrator")

    def _require_voter(self, caller: str) -> None:
        if not self._registry.is_registered(caller):
            raise AuthorizationFailure(f"{caller!r} is not a registered voter")

    def _require_status(self, expected: WorkflowStatus) -> None:
        if self._status != expected:
            raise PhaseViolation(expected, self._status)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def _advance(self) -> list[Event]:
        previous = self._status
        self._status = previous.next
        logger.info("Workflow status %s -> %s", previous.name, self._status.name)
        return [WorkflowStatusChange(previous=previous, new=self._status)]

    def _commit(self, value: Any, events: list[Event]) -> Outcome:
        self.events.extend(events)
        return Outcome(value=value, events=events)

    # ------------------------------------------------------------------
    # Administrator operations
    # ------------------------------------------------------------------

    @_operation
    def register_voter(self, caller: str, voter: str) -> Outcome:
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.RegisteringVoters)
        return self._commit(voter, self._registry.register(voter))

    @_operation
    def start_proposal_registration(self, caller: str) -> Outcome:
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.RegisteringVoters)
        self._book.open_proposal_phase()
        return self._commit(self._status.next, self._advance())

    @_operation
    def end_proposal_registration(self, caller: str) -> Outcome:
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.ProposalsRegistrationStarted)
        if self._book.submitted < self.config.min_proposals:
            raise NotEnoughProposals(self.config.min_proposals, self._book.submitted, self._status)
        return self._commit(self._status.next, self._advance())

    @_operation
    def set_voting_quorum(self, caller: str, pct: int) -> Outcome:
        """Minimum turnout, as a percentage of registered voters."""
        self._check_quorum(caller, pct)
        self._voting_quorum = pct
        logger.info("Voting quorum set to %d%%", pct)
        return self._commit(pct, [])

    @_operation
    def set_winning_quorum(self, caller: str, pct: int) -> Outcome:
        """Minimum support for the leader, as a percentage of votes cast."""
        self._check_quorum(caller, pct)
        self._winning_quorum = pct
        logger.info("Winning quorum set to %d%%", pct)
        return self._commit(pct, [])

    def _check_quorum(self, caller: str, pct: int) -> None:
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.ProposalsRegistrationEnded)
        if isinstance(pct, bool) or not isinstance(pct, int) or not 0 <= pct <= 100:
            raise QuorumParameterOutOfRange(f"Quorum must be an integer in [0, 100], got {pct!r}")

    @_operation
    def start_voting_session(self, caller: str) -> Outcome:
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.ProposalsRegistrationEnded)
        return self._commit(self._status.next, self._advance())

    @_operation
    def end_voting_session(self, caller: str) -> Outcome:
        """Close voting, tally, and reach VotesTallied in one step.

        The tally is computed before any status change, so a tally that
        cannot be computed (QuorumUndefined) leaves the session open.
        """
        self._require_administrator(caller)
        self._require_status(WorkflowStatus.VotingSessionStarted)
        result, tally_events = self._engine.tally(
            self._book.to_list(),
            registered_voters=self._registry.registered_voters,
            voters_nb=self._box.voters_nb,
            voting_quorum=self._voting_quorum,
            winning_quorum=self._winning_quorum,
        )

        events = self._advance()
        events.extend(tally_events)
        self._result = result
        events.extend(self._advance())
        return self._commit(result, events)

    # ------------------------------------------------------------------
    # Voter operations
    # ------------------------------------------------------------------

    @_operation
    def register_proposal(self, caller: str, description: str) -> Outcome:
        """Submit a proposal. Returns its index."""
        self._require_voter(caller)
        self._require_status(WorkflowStatus.ProposalsRegistrationStarted)
        proposal_id, events = self._book.register(description)
        return self._commit(proposal_id, events)

    @_operation
    def cast_vote(self, caller: str, proposal_id: int) -> Outcome:
        self._require_voter(caller)
        self._require_status(WorkflowStatus.VotingSessionStarted)
        return self._commit(proposal_id, self._box.cast(caller, proposal_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @_operation
    def get_winner(self) -> list[str]:
        """Descriptions of the published winners, in index order."""
        self._require_status(WorkflowStatus.VotesTallied)
        return list(self._result.descriptions)

    @property
    def status(self) -> WorkflowStatus:
        return self._status

    @property
    def registered_voters(self) -> int:
        return self._registry.registered_voters

    @property
    def voters_nb(self) -> int:
        return self._box.voters_nb

    @property
    def voting_quorum(self) -> int:
        return self._voting_quorum

    @property
    def winning_quorum(self) -> int:
        return self._winning_quorum

    @property
    def result(self) -> TallyResult | None:
        return self._result

    def is_administrator(self, caller: str) -> bool:
        return bool(self._is_administrator(caller))

    @_operation
    def get_voter(self, voter: str) -> Voter:
        return self._registry.get(voter)

    @_operation
    def get_proposal(self, proposal_id: int) -> Proposal:
        return self._book.get(proposal_id)

    @_operation
    def proposals(self) -> list[Proposal]:
        return self._book.to_list()

    @_operation
    def snapshot(self) -> dict[str, Any]:
        """JSON-serializable view of the whole ballot."""
        return {
            "status": self._status.name,
            "registered_voters": self._registry.registered_voters,
            "voters_nb": self._box.voters_nb,
            "voting_quorum": self._voting_quorum,
            "winning_quorum": self._winning_quorum,
            "voters": self._registry.to_dict(),
            "proposals": [p.to_dict() for p in self._book.to_list()],
            "result": self._result.to_dict() if self._result else None,
        }
