"""Data models for the store catalog."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

DEFAULT_CATEGORY = "Misc"

# Header keys used by the store table, mapped to ItemRecord attributes.
HEADER_FIELDS = {
    "name": "display_name",
    "price": "price",
    "category": "category",
    "weight": "weight",
    "quantityLimit": "quantity_limit",
}


class SortDirection(Enum):
    """Sort direction options."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class ItemRecord:
    """A purchasable store item after defaults have been applied."""

    id: str
    display_name: str
    price: float
    category: str = DEFAULT_CATEGORY
    weight: float = 0
    quantity_limit: int = 0  # 0 = unlimited
    limit_mode: str | None = None
    source_mod: str | None = None
    karma_type: str | None = None
    enabled: bool = True

    @classmethod
    def from_raw(cls, item_id: str, raw: Mapping[str, Any]) -> ItemRecord:
        """Build a record from a ``StoreItems.json`` entry.

        Missing or empty values fall back to defaults rather than failing:
        the identifier stands in for the name, numbers default to 0 and the
        category to ``Misc``. Only an explicit ``Enabled: false`` disables an
        item.
        """

        return cls(
            id=item_id,
            display_name=_text(raw.get("CustomName")) or item_id,
            price=_number(raw.get("BasePrice")),
            category=_text(raw.get("Category")) or DEFAULT_CATEGORY,
            weight=_number(raw.get("Weight")),
            quantity_limit=int(_number(raw.get("QuantityLimit"))),
            limit_mode=_text(raw.get("LimitMode")),
            source_mod=_text(raw.get("Mod")),
            karma_type=_text(raw.get("KarmaType")),
            enabled=raw.get("Enabled") is not False,
        )

    @property
    def is_available(self) -> bool:
        """Whether the item belongs in the working set."""
        return self.enabled and self.price > 0

    @property
    def is_unlimited(self) -> bool:
        return self.quantity_limit <= 0


@dataclass(frozen=True)
class SortState:
    """The single active sort field and direction."""

    field: str = "display_name"
    direction: SortDirection = SortDirection.ASC

    @property
    def reverse(self) -> bool:
        return self.direction is SortDirection.DESC


def resolve_sort_field(key: str) -> str:
    """Map a header key or attribute name to an ItemRecord attribute.

    Raises:
        ValueError: if ``key`` names neither a header nor an attribute.
    """

    if key in HEADER_FIELDS:
        return HEADER_FIELDS[key]
    if key in ItemRecord.__dataclass_fields__:
        return key
    raise ValueError(f"Unknown sort field: {key!r}")


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _number(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return number if math.isfinite(number) else 0
