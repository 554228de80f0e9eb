import logging
from collections.abc import Sequence
from dataclasses import dataclass

from top10qb.domain.models import PLACEHOLDER_WORST, DroppedEntry, Movement, RankingEntry, WorstQB
from top10qb.sheets.guardrails import (
    clean_badge,
    clean_movement,
    clean_name,
    clean_rank,
    clean_spots,
    clean_team,
    parse_leading_int,
    to_slug,
)

logger = logging.getLogger(__name__)

MIN_RANK = 1
MAX_RANK = 10

_HEADER_MARKERS = frozenset({"rank", "rank:", "#"})
_DATE_MARKERS = frozenset({"date", "date:"})
_WEEK_LABEL_MARKER = "week label"
_DEFAULT_WEEK_LABEL = "Rankings"


@dataclass(frozen=True)
class RankingsTable:
    entries: tuple[RankingEntry, ...]
    week_label: str
    current_date: str


def _cell(row: Sequence[str], index: int) -> str | None:
    return row[index] if index < len(row) else None


def _top10_rank(raw: str | None) -> int | None:
    n = parse_leading_int(raw.strip() if raw else raw)
    if n is None or not MIN_RANK <= n <= MAX_RANK:
        return None
    return n


def _find_data_start(rows: Sequence[Sequence[str]]) -> tuple[int, str, str]:
    week_label = _DEFAULT_WEEK_LABEL
    current_date = ""
    for i, row in enumerate(rows):
        first = (_cell(row, 0) or "").strip().lower()
        if _WEEK_LABEL_MARKER in first:
            week_label = (_cell(row, 1) or "").strip()
        if first in _DATE_MARKERS:
            current_date = (_cell(row, 1) or "").strip()
        if first in _HEADER_MARKERS:
            return i + 1, week_label, current_date

    # No header row: data starts at the first row that looks like a rank.
    for i, row in enumerate(rows):
        if _top10_rank(_cell(row, 0)) is not None:
            return i, week_label, current_date
    return 0, week_label, current_date


def transform_rankings(rows: Sequence[Sequence[str]]) -> RankingsTable:
    """Map the Rankings tab into ranking entries sorted by rank.

    Columns after the header: rank, name, team, commentary, direction,
    spots, badge. Rows without a name or with a rank outside 1-10 are
    skipped, as is any row repeating a rank already taken above it.
    """
    data_start, week_label, current_date = _find_data_start(rows)

    entries: list[RankingEntry] = []
    seen_ranks: set[int] = set()
    skipped = 0
    for row in rows[data_start:]:
        if len(row) < 2:
            skipped += 1
            continue
        name = clean_name(row[1]).value
        if not name:
            skipped += 1
            continue
        rank = _top10_rank(row[0])
        if rank is None:
            logger.debug("Skipping rankings row with bad rank %r for %s", row[0], name)
            skipped += 1
            continue
        if rank in seen_ranks:
            logger.warning("Duplicate rank %d for %s; keeping the earlier row", rank, name)
            skipped += 1
            continue
        seen_ranks.add(rank)

        commentary = (_cell(row, 3) or "").strip() or f"{name} is ranked #{rank} this week."
        entries.append(
            RankingEntry(
                rank=rank,
                name=name,
                team=clean_team(_cell(row, 2)).value,
                commentary=commentary,
                movement=Movement.of(clean_movement(_cell(row, 4)).value, clean_spots(_cell(row, 5)).value),
                slug=to_slug(name),
                badge=clean_badge(_cell(row, 6)).value,
            )
        )

    entries.sort(key=lambda e: e.rank)
    if skipped:
        logger.debug("Skipped %d rankings rows", skipped)
    return RankingsTable(entries=tuple(entries), week_label=week_label, current_date=current_date)


def transform_dropped(rows: Sequence[Sequence[str]]) -> tuple[DroppedEntry, ...]:
    """Map the Dropped Out tab (header, then name and previous rank)."""
    dropped: list[DroppedEntry] = []
    for row in rows[1:]:
        name = clean_name(_cell(row, 0)).value
        if not name:
            continue
        dropped.append(DroppedEntry(name=name, prev=clean_rank(_cell(row, 1), 0).value, slug=to_slug(name)))
    return tuple(dropped)


def transform_worst(rows: Sequence[Sequence[str]]) -> WorstQB:
    """Return the first named row of the Worst QB tab, or a placeholder."""
    for row in rows[1:]:
        name = clean_name(_cell(row, 0)).value
        if not name:
            continue
        return WorstQB(
            name=name,
            team=clean_team(_cell(row, 1)).value,
            commentary=(_cell(row, 2) or "").strip() or f"{name} is the worst QB of the week.",
            slug=to_slug(name),
        )
    return PLACEHOLDER_WORST
