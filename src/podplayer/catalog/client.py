"""Async client for the public show catalog."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from podplayer.models import Show, ShowPreview

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_CATALOG_URL = "https://podcast-api.netlify.app"

_PREVIEWS = TypeAdapter(list[ShowPreview])


class CatalogError(Exception):
    """Base exception for catalog errors."""


class CatalogFetchError(CatalogError):
    """Error fetching from the catalog."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class CatalogParseError(CatalogError):
    """The catalog answered with something that is not a show listing."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Failed to parse {url}: {message}")


class CatalogClient:
    """Client for the show catalog service.

    ``/shows`` lists show previews; ``/id/{id}`` returns one show with its
    seasons and episodes.
    """

    USER_AGENT = "podplayer/0.1.0"

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the catalog client.

        Args:
            base_url: Root URL of the catalog service.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_previews(self) -> list[ShowPreview]:
        """Get every show in the catalog.

        Returns:
            Show previews in catalog order.

        Raises:
            CatalogFetchError: If the request fails.
            CatalogParseError: If the response is not a show list.
        """
        url = f"{self.base_url}/shows"
        data = await self._get_json(url)
        try:
            return _PREVIEWS.validate_python(data)
        except ValidationError as e:
            raise CatalogParseError(url, f"{e.error_count()} invalid fields") from e

    async def get_show(self, show_id: str) -> Show:
        """Get a show with its seasons and episodes.

        Args:
            show_id: Catalog identifier of the show.

        Returns:
            The show.

        Raises:
            CatalogFetchError: If the request fails.
            CatalogParseError: If the response is not a show.
        """
        url = f"{self.base_url}/id/{show_id}"
        data = await self._get_json(url)
        try:
            return Show.model_validate(data)
        except ValidationError as e:
            raise CatalogParseError(url, f"{e.error_count()} invalid fields") from e

    async def get_shows(
        self, show_ids: Sequence[str], max_concurrent: int = 8
    ) -> list[Show | CatalogError]:
        """Get several shows concurrently.

        A show that fails to load is returned as its error so that one bad
        entry does not abort the batch.

        Args:
            show_ids: Catalog identifiers of the shows.
            max_concurrent: Maximum requests in flight.

        Returns:
            One show or error per id, in the order of ``show_ids``.
        """
        semaphore = asyncio.Semaphore(max(1, max_concurrent))

        async def fetch(show_id: str) -> Show | CatalogError:
            async with semaphore:
                try:
                    return await self.get_show(show_id)
                except CatalogError as e:
                    return e

        return list(await asyncio.gather(*(fetch(i) for i in show_ids)))

    async def _get_json(self, url: str) -> Any:
        """Fetch and decode a JSON document.

        Raises:
            CatalogFetchError: If fetching fails.
            CatalogParseError: If the body is not JSON.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.USER_AGENT},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise CatalogFetchError(url, "Request timed out") from e
        except httpx.HTTPStatusError as e:
            raise CatalogFetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise CatalogFetchError(url, str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            raise CatalogParseError(url, "Response is not JSON") from e
