"""Abstract store for Product records.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from catalog.domain.model.product import Product

Snapshot = tuple[Product, ...]
SnapshotListener = Callable[[Snapshot], None]


class ProductStore(ABC):

    @abstractmethod
    def add(self, name: str, raw_price: str, category: str) -> bool:
        """Register a product from raw input.

        Returns False, leaving the store untouched, when the input is
        invalid.
        """

    @abstractmethod
    def remove(self, product_id: int) -> None:
        """Remove the product with *product_id*; unknown ids are ignored."""

    @abstractmethod
    def list(self) -> Snapshot:
        """Return the current products in insertion order."""

    @abstractmethod
    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call *listener* with each new snapshot; returns an unsubscribe hook."""
