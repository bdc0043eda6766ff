"""OpenFoodFacts product search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_USER_AGENT = "food-search/0.1"


class OpenFoodFactsClient(Protocol):
    """Interface for OpenFoodFacts product search."""

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        """Search products by free text and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed OpenFoodFacts client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, base_url: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(headers={"User-Agent": _USER_AGENT}),
        )

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        """Run a simple product search."""
        response = await self.http_client.get(
            f"{self.base_url}/cgi/search.pl",
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "page_size": page_size,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
