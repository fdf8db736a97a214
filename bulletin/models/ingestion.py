"""Event storage and ingestion result models."""

from dataclasses import dataclass, field

from bulletin.models.event import CalendarEvent
from bulletin.models.session import RunContext


@dataclass
class EventArena:
    """Append-only store of every event built during a run.

    Output lists and the merge lookup refer to events by index.
    """

    events: list[CalendarEvent] = field(default_factory=list)

    def append(self, event: CalendarEvent) -> int:
        """Store an event and return its index."""
        self.events.append(event)
        return len(self.events) - 1

    def __getitem__(self, index: int) -> CalendarEvent:
        return self.events[index]

    def __len__(self) -> int:
        return len(self.events)

    def resolve(self, indices: list[int]) -> list[CalendarEvent]:
        """Events for the given indices, in order."""
        return [self.events[i] for i in indices]


@dataclass
class IngestionResult:
    """Events routed into output sections plus the skip tally.

    The two-week bulletin fills ``stake_indices`` and ``ward_indices``;
    the digest fills ``digest_indices`` only.
    """

    arena: EventArena
    context: RunContext
    stake_indices: list[int] = field(default_factory=list)
    ward_indices: list[int] = field(default_factory=list)
    digest_indices: list[int] = field(default_factory=list)
    skipped: dict[str, int] = field(default_factory=dict)

    @property
    def stake_events(self) -> list[CalendarEvent]:
        return self.arena.resolve(self.stake_indices)

    @property
    def ward_events(self) -> list[CalendarEvent]:
        return self.arena.resolve(self.ward_indices)

    @property
    def digest_events(self) -> list[CalendarEvent]:
        return self.arena.resolve(self.digest_indices)
