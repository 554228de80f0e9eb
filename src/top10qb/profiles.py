"""Per-player views derived from a snapshot (player and archive pages)."""

from collections.abc import Sequence
from dataclasses import dataclass

from top10qb.domain.models import UNKNOWN_TEAM, Direction, HistoryPoint, Movement, Snapshot

# History charts draw rank on a reversed axis with a little headroom below 10.
CHART_RANK_DOMAIN = (1, 12)

MIN_SEARCH_LENGTH = 2

_NO_HISTORY_WEEK = "Off"


@dataclass(frozen=True)
class PlayerCard:
    name: str
    slug: str
    team: str
    commentary: str
    movement: Movement
    rank: int | None = None
    prev: int | None = None

    @property
    def is_ranked(self) -> bool:
        return self.rank is not None


@dataclass(frozen=True)
class PlayerProfile:
    card: PlayerCard
    history: tuple[HistoryPoint, ...]
    highest: int | None
    lowest: int | None


@dataclass(frozen=True)
class HistoryChange:
    point: HistoryPoint
    movement: Movement | None


@dataclass(frozen=True)
class PlayerMatch:
    name: str
    slug: str


def find_player(snapshot: Snapshot, slug: str) -> PlayerCard | None:
    """Look a slug up among current rankings, then among dropped players."""
    for entry in snapshot.rankings:
        if entry.slug == slug:
            return PlayerCard(
                name=entry.name,
                slug=entry.slug,
                team=entry.team,
                commentary=entry.commentary,
                movement=entry.movement,
                rank=entry.rank,
            )
    for dropped in snapshot.dropped:
        if dropped.slug == slug:
            return PlayerCard(
                name=dropped.name,
                slug=dropped.slug,
                team=UNKNOWN_TEAM,
                commentary="",
                movement=Movement(),
                prev=dropped.prev,
            )
    return None


def player_profile(snapshot: Snapshot, slug: str) -> PlayerProfile | None:
    card = find_player(snapshot, slug)
    if card is None:
        return None

    history = snapshot.player_history.get(slug, ())
    if not history and card.rank is not None:
        history = (HistoryPoint(week=_NO_HISTORY_WEEK, rank=card.rank),)

    ranks = [p.rank for p in history]
    return PlayerProfile(
        card=card,
        history=history,
        highest=min(ranks) if ranks else None,
        lowest=max(ranks) if ranks else None,
    )


def history_changes(history: Sequence[HistoryPoint]) -> list[HistoryChange]:
    """Newest-first history with movement against the week before.

    A lower rank number than the previous week is movement ``up``. The
    oldest point has no movement.
    """
    changes: list[HistoryChange] = []
    for i in range(len(history) - 1, -1, -1):
        point = history[i]
        if i == 0:
            changes.append(HistoryChange(point=point, movement=None))
            continue
        diff = history[i - 1].rank - point.rank
        if diff > 0:
            movement = Movement(Direction.UP, diff)
        elif diff < 0:
            movement = Movement(Direction.DOWN, -diff)
        else:
            movement = Movement(Direction.SAME, 0)
        changes.append(HistoryChange(point=point, movement=movement))
    return changes


def search_players(snapshot: Snapshot, query: str) -> list[PlayerMatch]:
    """Case-insensitive name search across ranked and dropped players."""
    if len(query) < MIN_SEARCH_LENGTH:
        return []
    needle = query.lower()
    candidates = [PlayerMatch(e.name, e.slug) for e in snapshot.rankings]
    candidates.extend(PlayerMatch(d.name, d.slug) for d in snapshot.dropped)
    return [c for c in candidates if needle in c.name.lower()]
