"""Tally engine and the tie policies it can apply."""

from ballot.config import ConfigError
from .base import TiePolicy

# Tie policy registry - import policies here to register them
_tie_policies: dict[str, type[TiePolicy]] = {}


def register_tie_policy(policy_class: type[TiePolicy]) -> type[TiePolicy]:
    """Decorator to register a tie policy class under its key."""
    _tie_policies[policy_class().key] = policy_class
    return policy_class


def get_tie_policy(key: str) -> TiePolicy:
    """Return an instance of the tie policy registered under ``key``."""
    try:
        return _tie_policies[key]()
    except KeyError:
        known = ", ".join(sorted(_tie_policies))
        raise ConfigError(f"Unknown tie policy {key!r} (known: {known})") from None


def get_all_tie_policies() -> list[TiePolicy]:
    """Return instances of all registered tie policies."""
    return [policy_class() for policy_class in _tie_policies.values()]


from . import first_max  # noqa: E402,F401
from . import tie_preserving  # noqa: E402,F401
