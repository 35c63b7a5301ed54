"""Closed, single-administrator ballot with an automatic quorum-gated tally."""

from .config import BallotConfig, ConfigError, QuorumGating
from .errors import (
    AuthorizationFailure,
    BallotError,
    DuplicateRegistration,
    DuplicateVote,
    EmptyProposalDescription,
    InvalidProposalReference,
    NotEnoughProposals,
    PhaseViolation,
    QuorumParameterOutOfRange,
    QuorumUndefined,
)
from .models import Proposal, TallyResult, Voter, WorkflowStatus
from .workflow import Ballot, Outcome
