"""Searchable, sortable store item catalog for RICS."""

__all__ = [
    "CatalogLoader",
    "DataUnavailableError",
    "ItemCatalog",
    "ItemRecord",
    "SortDirection",
    "SortState",
    "StorePage",
    "render_rows",
]

from .catalog import ItemCatalog
from .errors import DataUnavailableError
from .loader import CatalogLoader
from .models import ItemRecord, SortDirection, SortState
from .page import StorePage
from .render import render_rows
