"""In-memory implementation of ProductStore."""

from __future__ import annotations

import logging
from typing import Callable

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_store import (
    ProductStore,
    Snapshot,
    SnapshotListener,
)

logger = logging.getLogger(__name__)


class InMemoryProductStore(ProductStore):
    """Holds the catalog as an immutable tuple that is replaced on write.

    Readers keep whatever snapshot they were handed; a later ``add`` or
    ``remove`` never changes it. Not thread-safe: one caller at a time.
    """

    def __init__(self) -> None:
        self._products: Snapshot = ()
        self._next_id = 1
        self._listeners: dict[object, SnapshotListener] = {}

    # --- ProductStore interface -----------------------------------------------

    def add(self, name: str, raw_price: str, category: str) -> bool:
        try:
            product = Product.create(
                id=self._next_id,
                name=name,
                raw_price=raw_price,
                category=category,
            )
        except ValidationError as exc:
            logger.debug("Rejected product input: %s", exc)
            return False

        self._products = self._products + (product,)
        self._next_id += 1
        logger.info(
            "Added product #%d '%s'",
            product.id,
            product.name,
            extra={"product_id": product.id, "category": product.category},
        )
        self._publish()
        return True

    def remove(self, product_id: int) -> None:
        remaining = tuple(p for p in self._products if p.id != product_id)
        if len(remaining) == len(self._products):
            logger.debug("No product #%s to remove", product_id)
            return

        self._products = remaining
        logger.info("Removed product #%d", product_id, extra={"product_id": product_id})
        self._publish()

    def list(self) -> Snapshot:
        return self._products

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        # Each registration gets its own token so a hook detaches only itself.
        token = object()
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    # --- Internal helpers -----------------------------------------------------

    def _publish(self) -> None:
        snapshot = self._products
        for listener in tuple(self._listeners.values()):
            listener(snapshot)
