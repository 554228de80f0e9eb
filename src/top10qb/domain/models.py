from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

UNKNOWN_TEAM = "—"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    SAME = "same"


class Badge(StrEnum):
    NEW = "NEW"


@dataclass(frozen=True)
class Movement:
    direction: Direction = Direction.SAME
    spots: int = 0

    @classmethod
    def of(cls, direction: Direction, spots: int) -> "Movement":
        """Build a movement, forcing the magnitude to 0 for ``same``."""
        return cls(direction=direction, spots=0 if direction is Direction.SAME else spots)


@dataclass(frozen=True)
class RankingEntry:
    rank: int
    name: str
    team: str
    commentary: str
    movement: Movement
    slug: str
    badge: Badge | None = None


@dataclass(frozen=True)
class DroppedEntry:
    name: str
    prev: int
    slug: str


@dataclass(frozen=True)
class WorstQB:
    name: str
    team: str
    commentary: str
    slug: str


@dataclass(frozen=True)
class HistoryPoint:
    week: str
    rank: int


@dataclass(frozen=True)
class ArchiveWeek:
    id: str
    label: str
    date: str
    top3: tuple[str, ...]


@dataclass(frozen=True)
class LogEntry:
    week_label: str
    date: str
    rank: int
    name: str
    slug: str


@dataclass(frozen=True)
class Snapshot:
    """One complete set of rankings data.

    ``player_history`` is copied into a read-only mapping, so a shared
    (cached) snapshot cannot be changed through it.
    """

    current_week_label: str
    current_date: str
    rankings: tuple[RankingEntry, ...]
    dropped: tuple[DroppedEntry, ...]
    worst: WorstQB
    player_history: Mapping[str, tuple[HistoryPoint, ...]] = field(default_factory=lambda: MappingProxyType({}))
    archive_weeks: tuple[ArchiveWeek, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.player_history, MappingProxyType):
            object.__setattr__(self, "player_history", MappingProxyType(dict(self.player_history)))


PLACEHOLDER_WORST = WorstQB(name="TBD", team=UNKNOWN_TEAM, commentary="No worst QB selected.", slug="tbd")

PLACEHOLDER_SNAPSHOT = Snapshot(
    current_week_label="Loading...",
    current_date="",
    rankings=(),
    dropped=(),
    worst=WorstQB(name="TBD", team=UNKNOWN_TEAM, commentary="Loading...", slug="tbd"),
)
