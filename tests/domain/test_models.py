from dataclasses import replace

import pytest

from top10qb.domain.models import PLACEHOLDER_SNAPSHOT, Direction, HistoryPoint, Movement, Snapshot
from top10qb.static_data import STATIC_SNAPSHOT


def _snapshot(history: dict[str, tuple[HistoryPoint, ...]]) -> Snapshot:
    return Snapshot(
        current_week_label="Week 1",
        current_date="",
        rankings=(),
        dropped=(),
        worst=PLACEHOLDER_SNAPSHOT.worst,
        player_history=history,
    )


class TestSnapshotPlayerHistory:
    def test_cannot_be_mutated(self) -> None:
        snapshot = _snapshot({"joe-burrow": (HistoryPoint("W1", 4),)})
        with pytest.raises(TypeError):
            snapshot.player_history["joe-burrow"] = ()  # type: ignore[index]

    def test_source_dict_changes_do_not_leak(self) -> None:
        history = {"joe-burrow": (HistoryPoint("W1", 4),)}
        snapshot = _snapshot(history)

        history["josh-allen"] = (HistoryPoint("W1", 3),)

        assert "josh-allen" not in snapshot.player_history

    def test_static_snapshot_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            STATIC_SNAPSHOT.player_history.clear()  # type: ignore[attr-defined]

    def test_default_is_empty(self) -> None:
        assert PLACEHOLDER_SNAPSHOT.player_history == {}

    def test_replace_keeps_equality(self) -> None:
        assert replace(STATIC_SNAPSHOT) == STATIC_SNAPSHOT


class TestMovement:
    def test_same_forces_zero_spots(self) -> None:
        assert Movement.of(Direction.SAME, 4) == Movement(Direction.SAME, 0)

    def test_up_keeps_spots(self) -> None:
        assert Movement.of(Direction.UP, 2).spots == 2
