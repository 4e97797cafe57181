"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_setup import configure_logging
from catalog.infrastructure.persistence.in_memory_product_store import (
    InMemoryProductStore,
)


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure logging from settings; explicit arguments win."""
    settings = get_settings()
    configure_logging(
        level=level or settings.log_level,
        json_logs=settings.json_logs if json_logs is None else json_logs,
    )


def product_store() -> InMemoryProductStore:
    return InMemoryProductStore()
