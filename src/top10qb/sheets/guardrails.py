"""Guardrails for hand-entered spreadsheet cells.

Every cleaner is total: it accepts a raw cell (or ``None`` for a missing
column) and returns a :class:`Cleaned` value, flagging when a default was
substituted. Nothing here raises on bad input.
"""

import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from top10qb.domain.models import UNKNOWN_TEAM, Badge, Direction

VALID_TEAMS: frozenset[str] = frozenset(
    {
        "BAL", "KC", "BUF", "CIN", "PHI", "HOU", "WAS", "SF", "DAL", "SEA",
        "CAR", "MIA", "LAC", "MIN", "GB", "DET", "TB", "ATL", "NO", "ARI",
        "LAR", "CHI", "NYJ", "NYG", "PIT", "DEN", "JAX", "TEN", "IND", "NE",
        "CLE", "LV",
    }
)  # fmt: skip

MAX_SPOTS = 15

_UP_TOKENS = frozenset({"up", "u", "▲"})
_DOWN_TOKENS = frozenset({"down", "dn", "d", "▼"})

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_HYPHENS_RE = re.compile(r"-+")

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cleaned(Generic[T]):
    value: T
    defaulted: bool = False


def parse_leading_int(raw: str | None) -> int | None:
    """Read the integer at the start of *raw*, ignoring trailing text.

    ``"7"``, ``" 7 "`` and ``"7th"`` all give 7; ``"abc"`` gives ``None``.
    """
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def clean_team(raw: str | None) -> Cleaned[str]:
    if not raw:
        return Cleaned(UNKNOWN_TEAM, defaulted=True)
    code = raw.strip().upper()
    if code in VALID_TEAMS:
        return Cleaned(code)
    return Cleaned(UNKNOWN_TEAM, defaulted=True)


def clean_movement(raw: str | None) -> Cleaned[Direction]:
    if not raw:
        return Cleaned(Direction.SAME, defaulted=True)
    token = raw.strip().lower()
    if token in _UP_TOKENS:
        return Cleaned(Direction.UP)
    if token in _DOWN_TOKENS:
        return Cleaned(Direction.DOWN)
    if token == "same":
        return Cleaned(Direction.SAME)
    return Cleaned(Direction.SAME, defaulted=True)


def clean_spots(raw: str | None) -> Cleaned[int]:
    n = parse_leading_int(raw)
    if n is None or n < 0:
        return Cleaned(0, defaulted=True)
    if n > MAX_SPOTS:
        return Cleaned(MAX_SPOTS, defaulted=True)
    return Cleaned(n)


def clean_badge(raw: str | None) -> Cleaned[Badge | None]:
    if not raw:
        return Cleaned(None)
    if raw.strip().upper() == Badge.NEW.value:
        return Cleaned(Badge.NEW)
    return Cleaned(None, defaulted=True)


def clean_name(raw: str | None) -> Cleaned[str]:
    """Trim and collapse internal whitespace. Empty means "skip this row"."""
    if not raw:
        return Cleaned("", defaulted=True)
    name = _WHITESPACE_RE.sub(" ", raw.strip())
    return Cleaned(name, defaulted=not name)


def clean_rank(raw: str | None, fallback: T) -> Cleaned[int | T]:
    n = parse_leading_int(raw.strip() if raw else raw)
    if n is None or n < 1:
        return Cleaned(fallback, defaulted=True)
    return Cleaned(n)


def to_slug(name: str) -> str:
    """Derive the URL-safe player key, e.g. ``"C.J. Stroud"`` -> ``"cj-stroud"``."""
    slug = _SLUG_STRIP_RE.sub("", name.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    return _HYPHENS_RE.sub("-", slug)
