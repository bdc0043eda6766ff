"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self,
        query: str,
        page_size: int = 20,
        data_types: list[str] | None = None,
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(
        self,
        query: str,
        page_size: int = 20,
        data_types: list[str] | None = None,
    ) -> dict[str, object]:
        """Search foods by query, optionally limited to some data types."""
        body: dict[str, object] = {"query": query, "pageSize": page_size}
        if data_types:
            body["dataType"] = data_types
        response = await self.http_client.post(
            f"{self.base_url}/foods/search",
            params={"api_key": self.api_key},
            json=body,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id."""
        response = await self.http_client.get(
            f"{self.base_url}/food/{fdc_id}",
            params={"api_key": self.api_key},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
