"""Derive player history and archive weeks from the Log tab.

The Log is append-only with columns ``Week Label, Date, Rank, Name`` and
the newest week logged first. Two views come out of it:

* player history, keyed by slug, ordered oldest week first (chart x-axis)
* archive weeks, ordered newest first as logged (archive cards)

Both read the same parsed entries, so a top-3 finish shown on an archive
card always matches the rank in that player's history for the week.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from top10qb.domain.models import ArchiveWeek, HistoryPoint, LogEntry
from top10qb.sheets.guardrails import clean_name, clean_rank, to_slug

logger = logging.getLogger(__name__)

ARCHIVE_TOP_N = 3

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class LogViews:
    player_history: dict[str, tuple[HistoryPoint, ...]]
    archive_weeks: tuple[ArchiveWeek, ...]


def parse_log_entries(rows: Sequence[Sequence[str]]) -> list[LogEntry]:
    """Parse log rows after the header, dropping rows missing a week, name or rank."""
    entries: list[LogEntry] = []
    for row in rows[1:]:
        if len(row) < 4:
            continue
        week_label = row[0].strip()
        date = row[1].strip()
        rank = clean_rank(row[2], None).value
        name = clean_name(row[3]).value
        if not week_label or not name or rank is None:
            continue
        entries.append(LogEntry(week_label=week_label, date=date, rank=rank, name=name, slug=to_slug(name)))
    return entries


def shorten_week_label(label: str) -> str:
    """Compact a week label for the chart axis.

    "Week 6 · Oct 15" -> "W6", "Offseason" -> "Off", "Preseason" -> "Pre",
    anything else keeps its first four characters.
    """
    if not label:
        return "?"
    lowered = label.lower().strip()
    if lowered.startswith("week "):
        return "W" + lowered.replace("week ", "", 1).split("·")[0].strip()
    if lowered.startswith("offseason"):
        return "Off"
    if lowered.startswith("pre"):
        return "Pre"
    return label[:4]


def _id_part(text: str) -> str:
    return _NON_ALNUM_RE.sub("-", text.lower()).strip("-")


def to_week_id(label: str, date: str) -> str:
    base = _id_part(label)
    if date:
        return f"{base}-{_id_part(date)}"
    return base


def _last_name(name: str) -> str:
    return name.split(" ")[-1]


def _weeks_in_log_order(entries: Sequence[LogEntry]) -> list[str]:
    # dict keeps first-seen order
    return list(dict.fromkeys(e.week_label for e in entries))


def build_player_history(entries: Sequence[LogEntry]) -> dict[str, tuple[HistoryPoint, ...]]:
    """Per-player rank series, oldest week first.

    Weeks a player was not logged are omitted rather than filled, so points
    are not evenly spaced. A repeated (week, player) row overwrites the
    earlier rank.
    """
    chronological = list(reversed(_weeks_in_log_order(entries)))

    ranks_by_player: dict[str, dict[str, int]] = {}
    for e in entries:
        ranks_by_player.setdefault(e.slug, {})[e.week_label] = e.rank

    return {
        slug: tuple(HistoryPoint(week=shorten_week_label(w), rank=weeks[w]) for w in chronological if w in weeks)
        for slug, weeks in ranks_by_player.items()
    }


def build_archive_weeks(entries: Sequence[LogEntry]) -> tuple[ArchiveWeek, ...]:
    """One card per week in log order (newest first) with the top-3 last names."""
    groups: dict[str, list[LogEntry]] = {}
    for e in entries:
        groups.setdefault(e.week_label, []).append(e)

    weeks: list[ArchiveWeek] = []
    for week_label, group in groups.items():
        date = group[0].date
        best = sorted(group, key=lambda e: e.rank)[:ARCHIVE_TOP_N]
        weeks.append(
            ArchiveWeek(
                id=to_week_id(week_label, date),
                label=week_label,
                date=date,
                top3=tuple(_last_name(e.name) for e in best),
            )
        )
    return tuple(weeks)


def transform_log(rows: Sequence[Sequence[str]]) -> LogViews:
    entries = parse_log_entries(rows)
    logger.debug("Parsed %d log entries from %d rows", len(entries), max(len(rows) - 1, 0))
    return LogViews(player_history=build_player_history(entries), archive_weeks=build_archive_weeks(entries))
