"""Catalog sources and the prioritized loader that tries them in order."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

import httpx

from .config import Settings
from .errors import DataUnavailableError, SourceError

logger = logging.getLogger(__name__)

USER_AGENT = "rics-store/0.1"


class CatalogSource(Protocol):
    def describe(self) -> str:  # pragma: no cover - protocol definition
        ...

    async def fetch(self) -> Mapping[str, Any]:  # pragma: no cover - protocol definition
        ...


def _ensure_mapping(payload: Any, origin: str) -> Mapping[str, Any]:
    if not isinstance(payload, dict):
        raise SourceError(f"{origin} did not contain a JSON object")
    return payload


class FileSource:
    """Reads ``StoreItems.json`` from the local filesystem."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    async def fetch(self) -> Mapping[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"Could not read {self.path}: {exc}") from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SourceError(f"Invalid JSON in {self.path}") from exc
        return _ensure_mapping(payload, str(self.path))


class HttpSource:
    """Fetches the catalog over HTTP.

    Reuse an ``httpx.AsyncClient`` when one is available; otherwise a
    transient client is created and closed around the request.
    """

    def __init__(
        self,
        url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.url = url
        self.client = client
        self.timeout = timeout

    def describe(self) -> str:
        return self.url

    async def fetch(self) -> Mapping[str, Any]:
        client = self.client
        close_client = False
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout, headers={"User-Agent": USER_AGENT})
            close_client = True

        try:
            response = await client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise SourceError(f"Failed to fetch {self.url}: {exc}") from exc
        except ValueError as exc:
            raise SourceError(f"Invalid JSON from {self.url}") from exc
        finally:
            if close_client:
                await client.aclose()

        return _ensure_mapping(payload, self.url)


class CatalogLoader:
    """Tries each source in priority order and returns the first mapping."""

    def __init__(self, sources: Sequence[CatalogSource]) -> None:
        self.sources = list(sources)

    async def load(self) -> Mapping[str, Any]:
        for source in self.sources:
            try:
                data = await source.fetch()
            except SourceError as exc:
                logger.info("Failed to load from %s: %s", source.describe(), exc)
                continue
            logger.info("Successfully loaded data from %s", source.describe())
            return data
        raise DataUnavailableError(
            f"Could not load the catalog from any of {len(self.sources)} sources"
        )


def default_sources(
    settings: Settings, *, client: httpx.AsyncClient | None = None
) -> list[CatalogSource]:
    """Build the candidate list: HTTP locations first when configured, then files."""

    sources: list[CatalogSource] = []
    if settings.base_url is not None:
        base = str(settings.base_url).rstrip("/")
        for path in settings.candidate_paths:
            relative = path[2:] if path.startswith("./") else path
            sources.append(
                HttpSource(f"{base}/{relative}", client=client, timeout=settings.http_timeout)
            )
    for path in settings.candidate_paths:
        sources.append(FileSource(settings.data_root / path))
    return sources
