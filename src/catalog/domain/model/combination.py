"""Combination entity: one sellable variant of a product (e.g. size M, red).

A combination is identified by its attribute set within its product; two
combinations of the same product never share the same set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.exceptions import CombinationConstraintError

MAX_REFERENCE_LENGTH = 64
_FORBIDDEN_REFERENCE_CHARS = re.compile(r"[<>;={}]")

AttributeSet = tuple[tuple[str, str], ...]


def validate_reference(reference: str) -> str:
    if len(reference) > MAX_REFERENCE_LENGTH:
        raise CombinationConstraintError(
            f"Reference cannot exceed {MAX_REFERENCE_LENGTH} characters",
            CombinationConstraintError.INVALID_REFERENCE,
        )
    if _FORBIDDEN_REFERENCE_CHARS.search(reference):
        raise CombinationConstraintError(
            f"Reference '{reference}' contains forbidden characters (<>;={{}})",
            CombinationConstraintError.INVALID_REFERENCE,
        )
    return reference


@dataclass
class Combination:

    id: int
    product_id: int
    attributes: AttributeSet
    reference: str = ""
    impact_on_price: Decimal = Decimal("0")
    is_default: bool = False

    @property
    def name(self) -> str:
        """Human-readable label, e.g. ``Size - M, Color - Red``."""
        return ", ".join(f"{group} - {value}" for group, value in self.attributes)

    def has_attribute_value(self, value: str) -> bool:
        return any(v.lower() == value.lower() for _, v in self.attributes)

    def matches(self, attributes: AttributeSet) -> bool:
        """True when both sets hold the same (group, value) pairs, in any order."""
        return _normalize(self.attributes) == _normalize(attributes)

    def update_reference(self, reference: str) -> None:
        self.reference = validate_reference(reference)

    def update_impact_on_price(self, impact: Decimal) -> None:
        if not isinstance(impact, Decimal) or not impact.is_finite():
            raise CombinationConstraintError(
                f"Price impact must be a finite decimal, got {impact!r}",
                CombinationConstraintError.INVALID_PRICE_IMPACT,
            )
        self.impact_on_price = impact


def _normalize(attributes: AttributeSet) -> frozenset[tuple[str, str]]:
    return frozenset((g.lower(), v.lower()) for g, v in attributes)
