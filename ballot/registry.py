"""Whitelist of participants allowed to submit proposals and vote."""

import logging
from dataclasses import replace

from ballot.errors import DuplicateRegistration
from ballot.events import Event, VoterRegistered
from ballot.models import Voter

logger = logging.getLogger(__name__)


class VoterRegistry:
    """Registered participants, keyed by identity. Entries are never removed."""

    def __init__(self) -> None:
        self._voters: dict[str, Voter] = {}

    @property
    def registered_voters(self) -> int:
        return len(self._voters)

    def is_registered(self, voter: str) -> bool:
        return voter in self._voters

    def get(self, voter: str) -> Voter:
        """Return a copy of the voter record (an unregistered default if unknown)."""
        if voter not in self._voters:
            return Voter()
        return replace(self._voters[voter])

    def register(self, voter: str) -> list[Event]:
        if voter in self._voters:
            raise DuplicateRegistration(f"{voter!r} is already registered")
        self._voters[voter] = Voter(registered=True)
        logger.debug("Registered voter %r (%d total)", voter, len(self._voters))
        return [VoterRegistered(voter=voter)]

    def mark_voted(self, voter: str, proposal_id: int) -> None:
        """Record a vote. Callers check eligibility and duplicates first."""
        record = self._voters[voter]
        record.has_voted = True
        record.voted_proposal_id = proposal_id

    def to_dict(self) -> dict[str, dict]:
        return {voter: record.to_dict() for voter, record in self._voters.items()}
