import pytest

from tests.fakes.sheets import snapshot_with
from top10qb.cli._output import (
    format_movement,
    print_archive,
    print_error,
    print_matches,
    print_player,
    print_rankings,
    print_status,
)
from top10qb.domain.errors import SheetFetchError
from top10qb.domain.models import Direction, Movement
from top10qb.domain.outcome import FetchOutcome, SnapshotOrigin
from top10qb.profiles import PlayerMatch, player_profile
from top10qb.static_data import STATIC_SNAPSHOT


class TestFormatMovement:
    def test_up(self) -> None:
        assert "▲ 2" in format_movement(Movement(Direction.UP, 2))

    def test_down(self) -> None:
        assert "▼ 1" in format_movement(Movement(Direction.DOWN, 1))

    def test_same(self) -> None:
        assert "▲" not in format_movement(Movement()) and "▼" not in format_movement(Movement())

    def test_none(self) -> None:
        assert format_movement(None) == ""


class TestPrinters:
    def test_print_error_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("sheet gone")
        captured = capsys.readouterr()
        assert "sheet gone" in captured.err
        assert captured.out == ""

    def test_print_status_with_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        error = SheetFetchError(message="HTTP 500", tab="Log")
        print_status(FetchOutcome(STATIC_SNAPSHOT, SnapshotOrigin.STALE_CACHE, error))
        out = capsys.readouterr().out
        assert "stale" in out
        assert "HTTP 500" in out

    def test_print_rankings(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_rankings(STATIC_SNAPSHOT)
        out = capsys.readouterr().out
        assert "Burrow" in out
        assert "Dropped out:" in out
        assert "Tagovailoa" in out
        assert "Worst QB:" in out

    def test_print_rankings_without_dropped(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_rankings(snapshot_with(STATIC_SNAPSHOT, dropped=()))
        assert "Dropped out:" not in capsys.readouterr().out

    def test_print_player(self, capsys: pytest.CaptureFixture[str]) -> None:
        profile = player_profile(STATIC_SNAPSHOT, "joe-burrow")
        assert profile is not None
        print_player(profile)
        out = capsys.readouterr().out
        assert "current #4" in out
        assert "Highest: #3  Lowest: #5" in out

    def test_print_dropped_player_without_history(self, capsys: pytest.CaptureFixture[str]) -> None:
        profile = player_profile(STATIC_SNAPSHOT, "justin-herbert")
        assert profile is not None
        print_player(profile)
        out = capsys.readouterr().out
        assert "OUT" in out
        assert "No ranking history yet." in out

    def test_print_archive_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_archive(())
        assert "No archived weeks." in capsys.readouterr().out

    def test_print_matches(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_matches([PlayerMatch("Joe Burrow", "joe-burrow")])
        assert "joe-burrow" in capsys.readouterr().out

    def test_print_no_matches(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_matches([])
        assert "No matching players." in capsys.readouterr().out
