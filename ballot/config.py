"""Ballot policy configuration.

Ties can publish one leader or all of them, and a failed quorum can either
suppress the winner or only be reported. Defaults: the first proposal
reaching the highest count wins, and the winner is published only when both
quorums are reached.
"""

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import find_dotenv, load_dotenv


class ConfigError(ValueError):
    """Raised for an invalid ballot setting."""
    pass


class QuorumGating(str, Enum):
    """What a failed quorum does to the published winner."""
    GATED = "gated"        # publish the blank proposal unless both quorums are reached
    ADVISORY = "advisory"  # publish the leaders regardless; verdicts are informational


@dataclass(frozen=True)
class BallotConfig:
    """Policies a ballot runs under.

    Attributes:
        tie_policy: Name of a registered tie policy ("first" or "all")
        quorum_gating: Whether quorum verdicts gate the published winner
        min_proposals: Real proposals (besides the blank one) required before
            proposal registration can be closed
    """
    tie_policy: str = "first"
    quorum_gating: QuorumGating = QuorumGating.GATED
    min_proposals: int = 0

    def __post_init__(self):
        if not isinstance(self.quorum_gating, QuorumGating):
            try:
                object.__setattr__(self, "quorum_gating", QuorumGating(self.quorum_gating))
            except ValueError:
                raise ConfigError(f"Unknown quorum gating: {self.quorum_gating!r}") from None
        if self.min_proposals < 0:
            raise ConfigError(f"min_proposals must be >= 0, got {self.min_proposals}")

        # Imported here so every registered policy is loaded before lookup
        from ballot.tally import get_tie_policy
        get_tie_policy(self.tie_policy)

    @classmethod
    def from_env(cls) -> "BallotConfig":
        """Build a config from the environment, reading a .env file if present.

        Reads BALLOT_TIE_POLICY, BALLOT_QUORUM_GATING and BALLOT_MIN_PROPOSALS.
        """
        load_dotenv(find_dotenv(usecwd=True))
        min_proposals = os.getenv("BALLOT_MIN_PROPOSALS", "0")
        try:
            min_proposals = int(min_proposals)
        except ValueError:
            raise ConfigError(f"BALLOT_MIN_PROPOSALS must be an integer, got {min_proposals!r}") from None
        return cls(
            tie_policy=os.getenv("BALLOT_TIE_POLICY", "first").lower(),
            quorum_gating=os.getenv("BALLOT_QUORUM_GATING", QuorumGating.GATED.value).lower(),
            min_proposals=min_proposals,
        )
