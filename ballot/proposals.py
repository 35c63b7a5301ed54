"""Ordered, append-only book of proposals."""

import logging
from dataclasses import replace

from ballot.errors import EmptyProposalDescription, InvalidProposalReference
from ballot.events import Event, ProposalRegistered
from ballot.models import Proposal

logger = logging.getLogger(__name__)

BLANK_DESCRIPTION = "Blank vote"


class ProposalBook:
    """Proposals indexed from 0, where index 0 is the blank proposal.

    The blank proposal is appended by ``open_proposal_phase`` when submissions
    open; before that the book is empty.
    """

    def __init__(self) -> None:
        self._proposals: list[Proposal] = []

    def __len__(self) -> int:
        return len(self._proposals)

    @property
    def submitted(self) -> int:
        """Number of real proposals, the blank one excluded."""
        return max(len(self._proposals) - 1, 0)

    def open_proposal_phase(self) -> None:
        if self._proposals:
            raise RuntimeError("Proposal phase already opened")
        self._proposals.append(Proposal(description=BLANK_DESCRIPTION))

    def register(self, description: str) -> tuple[int, list[Event]]:
        """Append a proposal and return its index with the notification."""
        if not description or not description.strip():
            raise EmptyProposalDescription("A proposal needs a description")
        self._proposals.append(Proposal(description=description))
        proposal_id = len(self._proposals) - 1
        logger.debug("Registered proposal %d: %r", proposal_id, description)
        return proposal_id, [ProposalRegistered(proposal_id=proposal_id)]

    def check_reference(self, proposal_id: int) -> None:
        if (
            not isinstance(proposal_id, int)
            or isinstance(proposal_id, bool)
            or not 0 <= proposal_id < len(self._proposals)
        ):
            raise InvalidProposalReference(
                f"No proposal {proposal_id!r} (valid: 0..{len(self._proposals) - 1})"
            )

    def get(self, proposal_id: int) -> Proposal:
        """Return a copy of one proposal."""
        self.check_reference(proposal_id)
        return replace(self._proposals[proposal_id])

    def add_vote(self, proposal_id: int) -> None:
        self._proposals[proposal_id].vote_count += 1

    def to_list(self) -> list[Proposal]:
        """Copies of all proposals, in index order."""
        return [replace(p) for p in self._proposals]
