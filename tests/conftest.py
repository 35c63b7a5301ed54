"""Shared test helpers."""

from ballot import Ballot, BallotConfig

ADMIN = "admin"


def make_ballot(
    voters: list[str],
    proposals: dict[str, list[str]] | None = None,
    config: BallotConfig | None = None,
    voting_quorum: int = 0,
    winning_quorum: int = 0,
) -> Ballot:
    """Build a Ballot with an open voting session.

    Args:
        voters: Participants to register
        proposals: {voter: [descriptions]} submitted in dict order
        config: Ballot policies (defaults when omitted)
        voting_quorum: Turnout percentage to set
        winning_quorum: Support percentage to set

    Returns:
        Ballot in VotingSessionStarted.
    """
    ballot = Ballot(ADMIN, config)
    for voter in voters:
        ballot.register_voter(ADMIN, voter)
    ballot.start_proposal_registration(ADMIN)
    for voter, descriptions in (proposals or {}).items():
        for description in descriptions:
            ballot.register_proposal(voter, description)
    ballot.end_proposal_registration(ADMIN)
    ballot.set_voting_quorum(ADMIN, voting_quorum)
    ballot.set_winning_quorum(ADMIN, winning_quorum)
    ballot.start_voting_session(ADMIN)
    return ballot


def cast_votes(ballot: Ballot, votes: dict[str, int]) -> None:
    """Cast {voter: proposal_id} in dict order."""
    for voter, proposal_id in votes.items():
        ballot.cast_vote(voter, proposal_id)


def vote_counts(ballot: Ballot) -> list[int]:
    return [p.vote_count for p in ballot.proposals()]


def event_types(events) -> list[str]:
    return [e.type for e in events]
