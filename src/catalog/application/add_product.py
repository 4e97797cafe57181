"""Application service: Add Product use case."""

from __future__ import annotations

from catalog.domain.repository.product_store import ProductStore


class AddProductHandler:

    def __init__(self, product_store: ProductStore) -> None:
        self._product_store = product_store

    def handle(self, name: str, price: str, category: str) -> bool:
        """Register a new product from raw form input.

        Returns False when any field is invalid; the caller decides how
        to tell the user.
        """
        return self._product_store.add(name, price, category)
