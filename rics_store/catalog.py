"""The store catalog: working set, filtered view and sort state."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import DataUnavailableError
from .loader import CatalogLoader
from .models import ItemRecord, SortDirection, SortState, resolve_sort_field

logger = logging.getLogger(__name__)

SAMPLE_ITEMS: tuple[ItemRecord, ...] = (
    ItemRecord(
        id="TextBook",
        display_name="Textbook",
        price=267,
        category="Books",
        weight=1.0,
        quantity_limit=5,
        limit_mode="OneStack",
        source_mod="Core",
    ),
    ItemRecord(
        id="MedicineHerbal",
        display_name="Herbal Medicine",
        price=150,
        category="Medical",
        weight=0.1,
        quantity_limit=25,
        limit_mode="OneStack",
        source_mod="Core",
    ),
    ItemRecord(
        id="Pemmican",
        display_name="Pemmican",
        price=80,
        category="Food",
        weight=0.05,
        quantity_limit=100,
        limit_mode="OneStack",
        source_mod="Core",
    ),
)


def sort_key(value: Any) -> tuple[int, Any]:
    """Comparison key: None counts as an empty string, strings ignore case."""
    if value is None:
        value = ""
    if isinstance(value, str):
        return (1, value.lower())
    return (0, value)


class ItemCatalog:
    """Holds the loaded items and the ordered view shown in the table."""

    def __init__(self) -> None:
        self._items: tuple[ItemRecord, ...] = ()
        self._filtered: list[ItemRecord] = []
        self._sort = SortState()
        self.loaded = False

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[ItemRecord, ...]:
        return self._items

    @property
    def sort_state(self) -> SortState:
        return self._sort

    def load(self, raw_mapping: Mapping[str, Any]) -> None:
        """Replace the working set with the enabled, priced items from ``raw_mapping``."""
        items: list[ItemRecord] = []
        skipped = 0
        for item_id, raw in raw_mapping.items():
            if not isinstance(raw, Mapping):
                logger.warning("Skipping %s: record is not an object", item_id)
                skipped += 1
                continue
            record = ItemRecord.from_raw(str(item_id), raw)
            if not record.is_available:
                skipped += 1
                continue
            items.append(record)

        self._set_items(items)
        logger.info("Processed %d items (%d skipped)", len(items), skipped)

    def load_sample_data(self) -> None:
        logger.info("Loading sample data...")
        self._set_items(SAMPLE_ITEMS)

    async def load_from(self, loader: CatalogLoader) -> bool:
        """Load through ``loader``, falling back to the sample set.

        Returns True when the real catalog was loaded.
        """

        try:
            raw = await loader.load()
        except DataUnavailableError as exc:
            logger.error("Error loading items: %s", exc)
            self.load_sample_data()
            return False
        self.load(raw)
        return True

    def filter(self, term: str) -> tuple[ItemRecord, ...]:
        needle = (term or "").strip().lower()
        if not needle:
            self._filtered = list(self._items)
        else:
            self._filtered = [item for item in self._items if _matches(item, needle)]
        logger.debug("Items after filtering %r: %d", needle, len(self._filtered))
        return self.sort(self._sort.field, toggle_direction=False)

    def sort(self, field: str, toggle_direction: bool = True) -> tuple[ItemRecord, ...]:
        """Order the filtered view by ``field``.

        With ``toggle_direction`` a repeated field flips the direction and a
        new field starts ascending. Without it the current direction is kept.
        The sort is stable in both directions.
        """

        attr = resolve_sort_field(field)
        direction = self._sort.direction
        if toggle_direction:
            direction = direction.flipped() if attr == self._sort.field else SortDirection.ASC
        self._sort = SortState(field=attr, direction=direction)

        self._filtered.sort(
            key=lambda item: sort_key(getattr(item, attr)), reverse=self._sort.reverse
        )
        return self.current_view()

    def current_view(self) -> tuple[ItemRecord, ...]:
        return tuple(self._filtered)

    def _set_items(self, items) -> None:
        self._items = tuple(items)
        self._filtered = list(self._items)
        self.loaded = True


def _matches(item: ItemRecord, needle: str) -> bool:
    for value in (item.display_name, item.category, item.source_mod, item.id):
        if value and needle in value.lower():
            return True
    return False
