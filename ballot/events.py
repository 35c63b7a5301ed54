"""Typed notifications emitted by ballot operations, and the log that keeps them."""

from dataclasses import dataclass, fields
from typing import Any, Iterator, TypeVar

from ballot.models import WorkflowStatus


@dataclass(frozen=True)
class Event:
    """Base class for every notification."""

    @property
    def type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.name if isinstance(value, WorkflowStatus) else value
        return data


@dataclass(frozen=True)
class VoterRegistered(Event):
    voter: str


@dataclass(frozen=True)
class WorkflowStatusChange(Event):
    previous: WorkflowStatus
    new: WorkflowStatus


@dataclass(frozen=True)
class ProposalRegistered(Event):
    proposal_id: int


@dataclass(frozen=True)
class Voted(Event):
    voter: str
    proposal_id: int


@dataclass(frozen=True)
class VotingQuorumEvent(Event):
    reached: bool


@dataclass(frozen=True)
class WinningQuorumEvent(Event):
    reached: bool


E = TypeVar("E", bound=Event)


class EventLog:
    """Append-only, ordered record of every notification a ballot emitted.

    Observers keep an offset and call ``since(offset)`` to read what is new.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []

    def extend(self, events: list[Event]) -> None:
        self._events.extend(events)

    def since(self, offset: int) -> list[Event]:
        """Events appended at or after position ``offset``."""
        return self._events[offset:]

    def of_type(self, event_type: type[E]) -> list[E]:
        return [e for e in self._events if isinstance(e, event_type)]

    def to_list(self) -> list[dict[str, Any]]:
        return [e.to_dict() for e in self._events]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __getitem__(self, index: int) -> Event:
        return self._events[index]
