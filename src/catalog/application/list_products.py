"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Price
from catalog.domain.repository.product_store import ProductStore


class ListProductsHandler:

    def __init__(self, product_store: ProductStore) -> None:
        self._product_store = product_store

    def handle(self) -> list[ProductDTO]:
        return [self._to_dto(p) for p in self._product_store.list()]

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(Price(product.price)),
            category=product.category,
        )
