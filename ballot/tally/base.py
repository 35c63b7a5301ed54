"""Abstract base class for tie policies."""

from abc import ABC, abstractmethod

from ballot.models import Proposal


class TiePolicy(ABC):
    """Decides which proposals lead when several share the highest count.

    Policies are registered via the @register_tie_policy decorator in
    ballot/tally/__init__.py and looked up by ``key``.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Name used to select this policy in configuration."""
        pass

    @property
    def description(self) -> str:
        """Optional description of how this policy picks leaders."""
        return ""

    @abstractmethod
    def select(self, proposals: list[Proposal], highest: int) -> list[int]:
        """Pick the leading proposal indices.

        Args:
            proposals: All proposals, blank one included at index 0
            highest: Highest vote count among them

        Returns:
            Non-empty list of indices, ascending
        """
        pass
