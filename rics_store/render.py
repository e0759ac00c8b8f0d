"""HTML rendering for the store items table."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Protocol

from .errors import RenderTargetMissing
from .models import ItemRecord

logger = logging.getLogger(__name__)

COLUMN_COUNT = 5
EMPTY_PLACEHOLDER = (
    f'<tr><td colspan="{COLUMN_COUNT}" style="text-align: center; padding: 40px;">'
    "No items found</td></tr>"
)

_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#039;"}
)


class RenderTarget(Protocol):
    def set_html(self, markup: str) -> None:  # pragma: no cover - protocol definition
        ...


class BufferTarget:
    """Keeps the last rendered markup in memory."""

    def __init__(self) -> None:
        self.markup = ""
        self.renders = 0

    def set_html(self, markup: str) -> None:
        self.markup = markup
        self.renders += 1


def escape_html(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.translate(_ESCAPES)


def format_number(value: float) -> str:
    """Print whole numbers without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _metadata(text: str | None, prefix: str = "") -> str:
    if not text:
        return ""
    return f'<span class="metadata">{prefix}{escape_html(text)}</span>'


def render_row(item: ItemRecord) -> str:
    limit = "Unlimited" if item.is_unlimited else str(item.quantity_limit)
    cells = [
        f"{escape_html(item.display_name)}{_metadata(item.source_mod, 'From ')}",
        f"{format_number(item.price)}{_metadata(item.karma_type, 'Karma: ')}",
        escape_html(item.category),
        format_number(item.weight),
        f"{limit}{_metadata(item.limit_mode)}",
    ]
    return "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"


def render_rows(items: Iterable[ItemRecord]) -> str:
    rows = [render_row(item) for item in items]
    if not rows:
        return EMPTY_PLACEHOLDER
    return "\n".join(rows)


def render(items: Iterable[ItemRecord], target: RenderTarget | None) -> None:
    """Write the table body for ``items`` into ``target``.

    Raises:
        RenderTargetMissing: if there is no target to render into.
    """

    if target is None:
        logger.error("Render target not found, skipping render")
        raise RenderTargetMissing("No render target available")
    items = list(items)
    target.set_html(render_rows(items))
    logger.debug("Rendered %d items", len(items))
