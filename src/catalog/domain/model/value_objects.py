"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError

# Optional sign, digits with at most one decimal point, optional exponent.
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class Price:
    """A strictly positive, finite unit price."""

    value: float

    def __post_init__(self) -> None:
        if not isinstance(self.value, (int, float)) or isinstance(self.value, bool):
            raise ValidationError(
                f"Price must be a number, got {type(self.value).__name__}"
            )
        if not math.isfinite(self.value):
            raise ValidationError(f"Price must be finite, got {self.value}")
        if self.value <= 0:
            raise ValidationError("Price must be greater than zero")

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def parse(raw: str) -> Price:
        """Parse user-typed price text.

        Either ``.`` or ``,`` is accepted as the decimal separator.
        """
        return Price(parse_decimal(raw))


def parse_decimal(raw: str) -> float:
    """Parse *raw* into a finite float, treating ``,`` as ``.``.

    Raises ValidationError for empty text, non-numeric text, more than
    one separator, and values that overflow to infinity.
    """
    if raw is None:
        raise ValidationError("Price is not a number: None")

    text = raw.strip().replace(",", ".")
    if not _NUMBER.fullmatch(text):
        raise ValidationError(f"Price is not a number: {raw!r}")

    value = float(text)
    if not math.isfinite(value):
        raise ValidationError(f"Price is not a finite number: {raw!r}")
    return value
