"""Request scoped models describing an audience dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Union


class Presence(str, Enum):
    ABSENT = "absent"
    PRESENT = "present"
    BOTH = "both"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    BOTH = "both"


class RegistryQuery(str, Enum):
    """Projection of the participant registry an audience is read from."""

    RESTRICTED = "project-absent"
    ALL = "project-all"


# "absent" and "present" read the same projection; only "both" widens it.
PRESENCE_QUERIES: dict[Presence, RegistryQuery] = {
    Presence.ABSENT: RegistryQuery.RESTRICTED,
    Presence.PRESENT: RegistryQuery.RESTRICTED,
    Presence.BOTH: RegistryQuery.ALL,
}


@dataclass(frozen=True)
class AudienceFilter:
    presence: Presence
    gender: Gender
    specific: Optional[bool] = None

    @property
    def query_kind(self) -> RegistryQuery:
        return PRESENCE_QUERIES[self.presence]

    @property
    def gender_code(self) -> str:
        return "F" if self.gender is Gender.FEMALE else "M"


@dataclass(frozen=True)
class EventContext:
    event_name: str
    day: int
    audience: AudienceFilter


@dataclass(frozen=True)
class Recipient:
    email: str


@dataclass(frozen=True)
class Resolved:
    recipients: Sequence[Recipient]


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class UpstreamFailed:
    detail: str


Resolution = Union[Resolved, Empty, UpstreamFailed]


class OutcomeStatus(str, Enum):
    SENT = "SENT"
    DELIVERY_FAILED = "DELIVERY_FAILED"
    ENCODING_FAILED = "ENCODING_FAILED"


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of processing one recipient."""

    recipient: str
    status: OutcomeStatus
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SENT


@dataclass(frozen=True)
class BatchResult:
    outcomes: Sequence[DispatchOutcome] = field(default_factory=tuple)

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def sent(self) -> int:
        return self.count(OutcomeStatus.SENT)

    @property
    def delivery_failed(self) -> int:
        return self.count(OutcomeStatus.DELIVERY_FAILED)

    @property
    def encoding_failed(self) -> int:
        return self.count(OutcomeStatus.ENCODING_FAILED)


__all__ = [
    "Presence",
    "Gender",
    "RegistryQuery",
    "PRESENCE_QUERIES",
    "AudienceFilter",
    "EventContext",
    "Recipient",
    "Resolved",
    "Empty",
    "UpstreamFailed",
    "Resolution",
    "OutcomeStatus",
    "DispatchOutcome",
    "BatchResult",
]
