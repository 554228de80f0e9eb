from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from top10qb.domain.models import Snapshot


class SnapshotStore(Protocol):
    def get_fresh(self) -> Snapshot | None: ...

    def last_good(self) -> Snapshot | None: ...

    def put(self, snapshot: Snapshot) -> None: ...

    def clear(self) -> None: ...
