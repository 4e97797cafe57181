"""Application service: Remove Product use case."""

from __future__ import annotations

from catalog.domain.repository.product_store import ProductStore


class RemoveProductHandler:

    def __init__(self, product_store: ProductStore) -> None:
        self._product_store = product_store

    def handle(self, product_id: int) -> None:
        self._product_store.remove(product_id)
