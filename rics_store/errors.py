from __future__ import annotations


class CatalogError(Exception):
    """Base store catalog error."""


class SourceError(CatalogError):
    """Raised when a single catalog source cannot produce a mapping."""


class DataUnavailableError(CatalogError):
    """Raised when every catalog source failed."""


class RenderTargetMissing(CatalogError):
    """Raised when there is no surface to render the table into."""
