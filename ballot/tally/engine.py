"""Tally engine: leaders, quorum verdicts and the published winner."""

import logging

from ballot.config import BallotConfig, QuorumGating
from ballot.errors import QuorumUndefined
from ballot.events import Event, VotingQuorumEvent, WinningQuorumEvent
from ballot.models import Proposal, TallyResult
from ballot.tally import get_tie_policy

logger = logging.getLogger(__name__)

BLANK_PROPOSAL_ID = 0


def percentage(part: int, whole: int) -> int:
    """Integer percentage of ``part`` in ``whole``, truncated.

    Raises:
        QuorumUndefined: If ``whole`` is zero
    """
    if whole == 0:
        raise QuorumUndefined(f"Cannot compute a percentage of {part} over zero")
    return 100 * part // whole


class TallyEngine:
    """Computes the tally of a closed voting session.

    The engine does not touch ballot state. It returns the result together
    with the quorum notifications and the caller commits both.

    Steps:
    1. Find the highest vote count
    2. Pick the leaders with the configured tie policy
    3. Turnout verdict: 100 * voters_nb // registered_voters >= voting_quorum
    4. Support verdict: 100 * highest // voters_nb >= winning_quorum
    5. Publish the leaders, or the blank proposal when gating applies and a
       quorum was missed
    """

    def __init__(self, config: BallotConfig | None = None):
        self.config = config or BallotConfig()
        self.tie_policy = get_tie_policy(self.config.tie_policy)

    def tally(
        self,
        proposals: list[Proposal],
        registered_voters: int,
        voters_nb: int,
        voting_quorum: int = 0,
        winning_quorum: int = 0,
    ) -> tuple[TallyResult, list[Event]]:
        if not proposals:
            raise ValueError("Cannot tally without proposals")

        highest = max(p.vote_count for p in proposals)
        leaders = self.tie_policy.select(proposals, highest)

        turnout = percentage(voters_nb, registered_voters)
        support = percentage(highest, voters_nb)
        voting_quorum_reached = turnout >= voting_quorum
        winning_quorum_reached = support >= winning_quorum

        gated = self.config.quorum_gating == QuorumGating.GATED
        if gated and not (voting_quorum_reached and winning_quorum_reached):
            winners = [BLANK_PROPOSAL_ID]
        else:
            winners = list(leaders)

        logger.info(
            "Tally: highest=%d leaders=%s turnout=%d%% support=%d%% winners=%s",
            highest, leaders, turnout, support, winners,
        )

        result = TallyResult(
            highest=highest,
            leaders=leaders,
            winners=winners,
            descriptions=[proposals[i].description for i in winners],
            voting_quorum_reached=voting_quorum_reached,
            winning_quorum_reached=winning_quorum_reached,
            details={
                "tie_policy": self.tie_policy.key,
                "quorum_gating": self.config.quorum_gating.value,
                "turnout": turnout,
                "support": support,
                "voting_quorum": voting_quorum,
                "winning_quorum": winning_quorum,
            },
        )
        events: list[Event] = [
            VotingQuorumEvent(reached=voting_quorum_reached),
            WinningQuorumEvent(reached=winning_quorum_reached),
        ]
        return result, events
