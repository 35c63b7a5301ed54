"""Core data models for a ballot run and its tally result."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class WorkflowStatus(IntEnum):
    """The six phases of a ballot, in the only order they can occur.

    Values are ordered, so ``status < WorkflowStatus.VotesTallied`` reads as
    "the ballot has not been tallied yet".
    """
    RegisteringVoters = 0
    ProposalsRegistrationStarted = 1
    ProposalsRegistrationEnded = 2
    VotingSessionStarted = 3
    VotingSessionEnded = 4
    VotesTallied = 5

    @property
    def next(self) -> "WorkflowStatus":
        """The status that directly follows this one."""
        return WorkflowStatus(self + 1)


@dataclass
class Voter:
    """A whitelisted participant.

    Attributes:
        registered: Whether the participant is on the whitelist
        has_voted: Whether the participant already cast their one vote
        voted_proposal_id: Index of the chosen proposal (meaningful only
            once has_voted is True)
    """
    registered: bool = False
    has_voted: bool = False
    voted_proposal_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "registered": self.registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }


@dataclass
class Proposal:
    """A proposal and the number of votes it received."""
    description: str
    vote_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "vote_count": self.vote_count}


@dataclass
class TallyResult:
    """Outcome of the tally.

    Attributes:
        highest: Highest vote count reached by any proposal
        leaders: Indices selected by the tie policy, before quorum gating
        winners: Published winner indices (after quorum gating)
        descriptions: Descriptions of the published winners, same order
        voting_quorum_reached: Turnout verdict
        winning_quorum_reached: Support verdict for the leading proposal
        details: Policy names and the percentages used for the verdicts
    """
    highest: int
    leaders: list[int]
    winners: list[int]
    descriptions: list[str]
    voting_quorum_reached: bool
    winning_quorum_reached: bool
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def quorums_reached(self) -> bool:
        return self.voting_quorum_reached and self.winning_quorum_reached

    def to_dict(self) -> dict[str, Any]:
        return {
            "highest": self.highest,
            "leaders": list(self.leaders),
            "winners": list(self.winners),
            "descriptions": list(self.descriptions),
            "voting_quorum_reached": self.voting_quorum_reached,
            "winning_quorum_reached": self.winning_quorum_reached,
            "details": dict(self.details),
        }
