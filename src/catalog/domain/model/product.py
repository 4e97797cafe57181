"""Product record.

Products are created once and never edited: the catalog only supports
adding and removing whole records.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Price


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for user input — it trims text
    fields and enforces every rule.  The ``__init__`` is left plain so a
    store can rebuild records it already validated.
    """

    id: int
    name: str
    price: float
    category: str

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(id: int, name: str, raw_price: str, category: str) -> Product:
        """Build a validated product from raw text input.

        Checks run in a fixed order: name, category, then price.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if not category or not category.strip():
            raise ValidationError("Product category is required")

        price = Price.parse(raw_price)

        return Product(
            id=id,
            name=name.strip(),
            price=float(price),
            category=category.strip(),
        )
