"""One-shot vote recording."""

import logging

from ballot.errors import DuplicateVote
from ballot.events import Event, Voted
from ballot.proposals import ProposalBook
from ballot.registry import VoterRegistry

logger = logging.getLogger(__name__)


class BallotBox:
    """Records each registered participant's single, irrevocable vote.

    Vote counts live on the proposals themselves; the box keeps ``voters_nb``
    in step so that the counts always add up to it.
    """

    def __init__(self, registry: VoterRegistry, book: ProposalBook):
        self.registry = registry
        self.book = book
        self.voters_nb = 0

    def cast(self, voter: str, proposal_id: int) -> list[Event]:
        """Record ``voter``'s vote. The voter must already be registered."""
        self.book.check_reference(proposal_id)
        if self.registry.get(voter).has_voted:
            raise DuplicateVote(f"{voter!r} has already voted")

        self.book.add_vote(proposal_id)
        self.registry.mark_voted(voter, proposal_id)
        self.voters_nb += 1
        logger.debug("%r voted for proposal %d", voter, proposal_id)
        return [Voted(voter=voter, proposal_id=proposal_id)]
