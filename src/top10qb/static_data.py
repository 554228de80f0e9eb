"""Bundled rankings shown when the sheet is unavailable or not set up."""

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


def _history(*points: tuple[str, int]) -> tuple[HistoryPoint, ...]:
    return tuple(HistoryPoint(week=week, rank=rank) for week, rank in points)


RANKINGS = (
    RankingEntry(
        rank=1,
        name="Lamar Jackson",
        team="BAL",
        commentary="Still the one. Nobody in the league is doing what Lamar does on a weekly basis. "
        "The Rankmaster has spoken.",
        movement=Movement(Direction.SAME, 0),
        slug="lamar-jackson",
    ),
    RankingEntry(
        rank=2,
        name="Patrick Mahomes",
        team="KC",
        commentary="Fine. He's good. The arm talent is stupid. I'm putting him at 2 and I don't want to talk about it.",
        movement=Movement(Direction.SAME, 0),
        slug="patrick-mahomes",
    ),
    RankingEntry(
        rank=3,
        name="Josh Allen",
        team="BUF",
        commentary="The most fun player in football when he's cooking. Slight edge over Burrow because he does it all.",
        movement=Movement(Direction.UP, 1),
        slug="josh-allen",
    ),
    RankingEntry(
        rank=4,
        name="Joe Burrow",
        team="CIN",
        commentary="Great arm, great hair, but I'm not sure he's actually doing anything besides throwing screens "
        "that Ja'Marr takes 70 yards.",
        movement=Movement(Direction.DOWN, 1),
        slug="joe-burrow",
    ),
    RankingEntry(
        rank=5,
        name="Jalen Hurts",
        team="PHI",
        commentary="The dual-threat ability is real. The deep ball accuracy is a work in progress. Still top 5.",
        movement=Movement(Direction.SAME, 0),
        slug="jalen-hurts",
    ),
    RankingEntry(
        rank=6,
        name="C.J. Stroud",
        team="HOU",
        commentary="Year two will tell us everything. Year one told us he's special.",
        movement=Movement(Direction.UP, 2),
        slug="cj-stroud",
    ),
    RankingEntry(
        rank=7,
        name="Jayden Daniels",
        team="WAS",
        commentary="Rookie magic is real but can he sustain it? I'm betting yes.",
        movement=Movement(Direction.UP, 3),
        slug="jayden-daniels",
        badge=Badge.NEW,
    ),
    RankingEntry(
        rank=8,
        name="Brock Purdy",
        team="SF",
        commentary="Yes I'm a 49ers fan. Yes he's at 8. No, the bias isn't helping him. "
        "It might actually be hurting him.",
        movement=Movement(Direction.DOWN, 1),
        slug="brock-purdy",
    ),
    RankingEntry(
        rank=9,
        name="Dak Prescott",
        team="DAL",
        commentary="The most polarizing QB in football. I think he's good. Not great. Good. Come at me.",
        movement=Movement(Direction.DOWN, 2),
        slug="dak-prescott",
    ),
    RankingEntry(
        rank=10,
        name="Geno Smith",
        team="SEA",
        commentary="I have Geno Smith at 10 and I will not be elaborating further.",
        movement=Movement(Direction.SAME, 0),
        slug="geno-smith",
    ),
)

DROPPED = (
    DroppedEntry(name="Tua Tagovailoa", prev=9, slug="tua-tagovailoa"),
    DroppedEntry(name="Justin Herbert", prev=10, slug="justin-herbert"),
)

WORST = WorstQB(
    name="Bryce Young",
    team="CAR",
    commentary="I'm rooting for the kid. But the tape isn't rooting back.",
    slug="bryce-young",
)

PLAYER_HISTORY = {
    "lamar-jackson": _history(("Pre", 1), ("W1", 1), ("W2", 1), ("W3", 2), ("W4", 1), ("W5", 1), ("Off", 1)),
    "patrick-mahomes": _history(("Pre", 2), ("W1", 2), ("W2", 1), ("W3", 1), ("W4", 2), ("W5", 2), ("Off", 2)),
    "josh-allen": _history(("Pre", 3), ("W1", 4), ("W2", 3), ("W3", 3), ("W4", 4), ("W5", 3), ("Off", 3)),
    "joe-burrow": _history(("Pre", 5), ("W1", 3), ("W2", 4), ("W3", 4), ("W4", 3), ("W5", 4), ("Off", 4)),
}

ARCHIVE_WEEKS = (
    ArchiveWeek(id="offseason-feb-2026", label="Offseason", date="Feb 3, 2026", top3=("Jackson", "Mahomes", "Allen")),
    ArchiveWeek(id="week-6", label="Week 6", date="Oct 15, 2026", top3=("Jackson", "Mahomes", "Allen")),
    ArchiveWeek(id="week-5", label="Week 5", date="Oct 8, 2026", top3=("Mahomes", "Allen", "Jackson")),
    ArchiveWeek(id="week-4", label="Week 4", date="Oct 1, 2026", top3=("Allen", "Jackson", "Hurts")),
    ArchiveWeek(id="week-3", label="Week 3", date="Sep 24, 2026", top3=("Mahomes", "Jackson", "Allen")),
    ArchiveWeek(id="week-2", label="Week 2", date="Sep 17, 2026", top3=("Mahomes", "Hurts", "Allen")),
    ArchiveWeek(id="week-1", label="Week 1", date="Sep 10, 2026", top3=("Mahomes", "Allen", "Hurts")),
)

STATIC_SNAPSHOT = Snapshot(
    current_week_label="Offseason · Feb 2026",
    current_date="February 3, 2026",
    rankings=RANKINGS,
    dropped=DROPPED,
    worst=WORST,
    player_history=PLAYER_HISTORY,
    archive_weeks=ARCHIVE_WEEKS,
)
