"""Adapter between input events and the catalog.

A search box feeds :meth:`StorePage.on_search_input` and the sortable
headers feed :meth:`StorePage.on_header_click`. Every change re-renders
into the page's target.
"""

from __future__ import annotations

import logging

from .catalog import ItemCatalog
from .errors import RenderTargetMissing
from .loader import CatalogLoader
from .models import HEADER_FIELDS
from .render import RenderTarget, render

logger = logging.getLogger(__name__)


class StorePage:
    def __init__(
        self,
        loader: CatalogLoader,
        target: RenderTarget | None,
        catalog: ItemCatalog | None = None,
    ) -> None:
        self.loader = loader
        self.target = target
        self.catalog = catalog or ItemCatalog()

    async def start(self) -> None:
        logger.info("RICS Store initializing...")
        await self.catalog.load_from(self.loader)
        self.refresh()
        logger.info("RICS Store initialized with %d items", len(self.catalog))

    def refresh(self) -> bool:
        """Render the current view; returns False when the cycle was aborted."""
        try:
            render(self.catalog.current_view(), self.target)
        except RenderTargetMissing:
            return False
        return True

    def on_search_input(self, text: str) -> None:
        logger.debug("Search input: %r", text)
        self.catalog.filter(text)
        self.refresh()

    def on_header_click(self, key: str) -> None:
        logger.debug("Sorting by: %s", key)
        try:
            self.catalog.sort(key, toggle_direction=True)
        except ValueError as exc:
            logger.warning("Ignoring header click: %s", exc)
            return
        self.refresh()

    def sort_indicators(self) -> dict[str, str]:
        """CSS class for each header key currently carrying the sort."""
        state = self.catalog.sort_state
        return {
            key: f"sort-{state.direction.value}"
            for key, attr in HEADER_FIELDS.items()
            if attr == state.field
        }
