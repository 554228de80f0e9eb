from top10qb.cache.memory_store import MemorySnapshotStore
from top10qb.cache.protocol import SnapshotStore

__all__ = ["MemorySnapshotStore", "SnapshotStore"]
