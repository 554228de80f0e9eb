"""Conversion between snapshots and the uppercase-keyed data contract.

The contract is what page renderers consume:

    {
        "CURRENT_WEEK_LABEL": str,
        "CURRENT_DATE": str,
        "RANKINGS": [{"rank", "name", "team", "commentary", "movement": {"dir", "spots"}, "slug", "badge"?}],
        "DROPPED": [{"name", "prev", "slug"}],
        "WORST": {"name", "team", "commentary", "slug"},
        "PLAYER_HISTORY": {slug: [{"week", "rank"}]},
        "ARCHIVE_WEEKS": [{"id", "label", "date", "top3"}],
    }
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from top10qb.domain.models import (
    ArchiveWeek,
    Badge,
    Direction,
    DroppedEntry,
    HistoryPoint,
    Movement,
    RankingEntry,
    Snapshot,
    WorstQB,
)


def _ranking_to_dict(entry: RankingEntry) -> dict[str, Any]:
    data: dict[str, Any] = {
        "rank": entry.rank,
        "name": entry.name,
        "team": entry.team,
        "commentary": entry.commentary,
        "movement": {"dir": entry.movement.direction.value, "spots": entry.movement.spots},
        "slug": entry.slug,
    }
    if entry.badge is not None:
        data["badge"] = entry.badge.value
    return data


def _ranking_from_dict(data: dict[str, Any]) -> RankingEntry:
    movement = data.get("movement", {})
    badge = data.get("badge")
    return RankingEntry(
        rank=int(data["rank"]),
        name=data["name"],
        team=data["team"],
        commentary=data["commentary"],
        movement=Movement.of(Direction(movement.get("dir", "same")), int(movement.get("spots", 0))),
        slug=data["slug"],
        badge=Badge(badge) if badge else None,
    )


def to_contract(snapshot: Snapshot) -> dict[str, Any]:
    """Render a snapshot as the data contract dict."""
    return {
        "CURRENT_WEEK_LABEL": snapshot.current_week_label,
        "CURRENT_DATE": snapshot.current_date,
        "RANKINGS": [_ranking_to_dict(e) for e in snapshot.rankings],
        "DROPPED": [asdict(d) for d in snapshot.dropped],
        "WORST": asdict(snapshot.worst),
        "PLAYER_HISTORY": {
            slug: [asdict(point) for point in points] for slug, points in snapshot.player_history.items()
        },
        "ARCHIVE_WEEKS": [{**asdict(w), "top3": list(w.top3)} for w in snapshot.archive_weeks],
    }


def from_contract(data: dict[str, Any]) -> Snapshot:
    """Rebuild a snapshot from a data contract dict."""
    return Snapshot(
        current_week_label=data["CURRENT_WEEK_LABEL"],
        current_date=data["CURRENT_DATE"],
        rankings=tuple(_ranking_from_dict(e) for e in data["RANKINGS"]),
        dropped=tuple(DroppedEntry(**d) for d in data["DROPPED"]),
        worst=WorstQB(**data["WORST"]),
        player_history={
            slug: tuple(HistoryPoint(**p) for p in points) for slug, points in data["PLAYER_HISTORY"].items()
        },
        archive_weeks=tuple(
            ArchiveWeek(id=w["id"], label=w["label"], date=w["date"], top3=tuple(w["top3"]))
            for w in data["ARCHIVE_WEEKS"]
        ),
    )


def dumps(snapshot: Snapshot, *, indent: int | None = 2) -> str:
    return json.dumps(to_contract(snapshot), indent=indent, ensure_ascii=False)


def loads(text: str) -> Snapshot:
    return from_contract(json.loads(text))
