"""Test helpers shared across the suite.

Nothing here touches I/O; the store under test is already in-memory.
"""

from __future__ import annotations

from catalog.domain.repository.product_store import Snapshot
from catalog.infrastructure.persistence.in_memory_product_store import (
    InMemoryProductStore,
)


class SnapshotRecorder:
    """Listener that keeps every snapshot it is handed."""

    def __init__(self) -> None:
        self.snapshots: list[Snapshot] = []

    def __call__(self, snapshot: Snapshot) -> None:
        self.snapshots.append(snapshot)


def store_with(*rows: tuple[str, str, str]) -> InMemoryProductStore:
    """Build a store pre-loaded with (name, price, category) rows."""
    store = InMemoryProductStore()
    for name, price, category in rows:
        assert store.add(name, price, category)
    return store
