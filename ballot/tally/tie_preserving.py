"""Tie-preserving policy."""

from ballot.models import Proposal
from ballot.tally import register_tie_policy
from ballot.tally.base import TiePolicy


@register_tie_policy
class TiePreservingPolicy(TiePolicy):
    """Every proposal reaching the highest count leads, in index order."""

    @property
    def key(self) -> str:
        return "all"

    @property
    def description(self) -> str:
        return "All leaders: every proposal with the highest count is published"

    def select(self, proposals: list[Proposal], highest: int) -> list[int]:
        leaders = [i for i, p in enumerate(proposals) if p.vote_count == highest]
        if not leaders:
            raise ValueError(f"No proposal has {highest} votes")
        return leaders
