"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "25.00"
    category: str
