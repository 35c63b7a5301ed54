"""Errors raised by ballot operations.

Every rejected operation raises one of these before touching any state, so a
caller that catches ``BallotError`` can correct its input and resubmit.
"""

from ballot.models import WorkflowStatus


class BallotError(Exception):
    """Base class for every rejected ballot operation."""
    pass


class PhaseViolation(BallotError):
    """Raised when an operation is attempted outside the phase that allows it."""

    def __init__(self, expected: WorkflowStatus, actual: WorkflowStatus, message: str | None = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Requires status {expected.name}, current status is {actual.name}"
        super().__init__(message)


class NotEnoughProposals(PhaseViolation):
    """Raised when proposal registration is closed before enough proposals exist."""

    def __init__(self, required: int, registered: int, actual: WorkflowStatus):
        self.required = required
        self.registered = registered
        super().__init__(
            actual, actual,
            f"At least {required} proposal(s) required besides the blank one, got {registered}",
        )


class AuthorizationFailure(BallotError):
    """Raised when the caller does not hold the role an operation needs."""
    pass


class DuplicateRegistration(BallotError):
    """Raised when registering a participant who is already whitelisted."""
    pass


class DuplicateVote(BallotError):
    """Raised when a participant tries to vote a second time."""
    pass


class InvalidProposalReference(BallotError):
    """Raised when a proposal index does not exist."""
    pass


class EmptyProposalDescription(BallotError):
    """Raised when a proposal is submitted without a description."""
    pass


class QuorumParameterOutOfRange(BallotError):
    """Raised when a quorum percentage is outside [0, 100]."""
    pass


class QuorumUndefined(BallotError):
    """Raised when a quorum percentage would divide by zero at tally time.

    This happens when nobody is registered, or when nobody voted.
    """
    pass
