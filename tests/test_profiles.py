from tests.fakes.sheets import snapshot_with
from top10qb.domain.models import UNKNOWN_TEAM, Direction, HistoryPoint, Movement
from top10qb.profiles import (
    CHART_RANK_DOMAIN,
    HistoryChange,
    PlayerMatch,
    find_player,
    history_changes,
    player_profile,
    search_players,
)
from top10qb.static_data import STATIC_SNAPSHOT


class TestFindPlayer:
    def test_ranked_player(self) -> None:
        card = find_player(STATIC_SNAPSHOT, "joe-burrow")
        assert card is not None
        assert card.rank == 4
        assert card.team == "CIN"
        assert card.is_ranked
        assert card.movement == Movement(Direction.DOWN, 1)

    def test_dropped_player(self) -> None:
        card = find_player(STATIC_SNAPSHOT, "tua-tagovailoa")
        assert card is not None
        assert card.rank is None
        assert card.prev == 9
        assert card.team == UNKNOWN_TEAM
        assert not card.is_ranked

    def test_unknown_slug(self) -> None:
        assert find_player(STATIC_SNAPSHOT, "tom-brady") is None


class TestPlayerProfile:
    def test_history_and_extremes(self) -> None:
        profile = player_profile(STATIC_SNAPSHOT, "joe-burrow")
        assert profile is not None
        assert profile.history[0] == HistoryPoint("Pre", 5)
        assert profile.highest == 3
        assert profile.lowest == 5

    def test_ranked_without_history_gets_single_point(self) -> None:
        profile = player_profile(STATIC_SNAPSHOT, "geno-smith")
        assert profile is not None
        assert profile.history == (HistoryPoint("Off", 10),)
        assert profile.highest == profile.lowest == 10

    def test_dropped_without_history_is_empty(self) -> None:
        profile = player_profile(STATIC_SNAPSHOT, "justin-herbert")
        assert profile is not None
        assert profile.history == ()
        assert profile.highest is None

    def test_unknown_slug(self) -> None:
        assert player_profile(STATIC_SNAPSHOT, "nobody") is None

    def test_history_ranks_fit_chart_domain(self) -> None:
        low, high = CHART_RANK_DOMAIN
        for history in STATIC_SNAPSHOT.player_history.values():
            assert all(low <= p.rank <= high for p in history)


class TestHistoryChanges:
    def test_newest_first_with_movement(self) -> None:
        history = (HistoryPoint("W1", 5), HistoryPoint("W2", 3), HistoryPoint("W3", 3), HistoryPoint("W4", 6))
        assert history_changes(history) == [
            HistoryChange(HistoryPoint("W4", 6), Movement(Direction.DOWN, 3)),
            HistoryChange(HistoryPoint("W3", 3), Movement(Direction.SAME, 0)),
            HistoryChange(HistoryPoint("W2", 3), Movement(Direction.UP, 2)),
            HistoryChange(HistoryPoint("W1", 5), None),
        ]

    def test_empty(self) -> None:
        assert history_changes(()) == []


class TestSearchPlayers:
    def test_matches_substring_case_insensitively(self) -> None:
        names = [m.name for m in search_players(STATIC_SNAPSHOT, "jo")]
        assert names == ["Josh Allen", "Joe Burrow"]

    def test_includes_dropped(self) -> None:
        assert search_players(STATIC_SNAPSHOT, "TUA") == [PlayerMatch("Tua Tagovailoa", "tua-tagovailoa")]

    def test_short_query_returns_nothing(self) -> None:
        assert search_players(STATIC_SNAPSHOT, "a") == []

    def test_no_match(self) -> None:
        assert search_players(snapshot_with(STATIC_SNAPSHOT, dropped=()), "tua") == []
