"""First-maximum tie policy."""

from ballot.models import Proposal
from ballot.tally import register_tie_policy
from ballot.tally.base import TiePolicy


@register_tie_policy
class FirstMaxPolicy(TiePolicy):
    """The lowest-indexed proposal reaching the highest count leads alone.

    Because the blank proposal sits at index 0, it wins every tie it is part of.
    """

    @property
    def key(self) -> str:
        return "first"

    @property
    def description(self) -> str:
        return "Single leader: first proposal in submission order with the highest count"

    def select(self, proposals: list[Proposal], highest: int) -> list[int]:
        for index, proposal in enumerate(proposals):
            if proposal.vote_count == highest:
                return [index]
        raise ValueError(f"No proposal has {highest} votes")
