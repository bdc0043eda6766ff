"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_search.adapters.fdc_client import HttpxFdcClient
from food_search.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from food_search.config import Settings, parse_data_types
from food_search.services.details import FoodDetailsService
from food_search.services.providers import FdcProvider, OpenFoodFactsProvider
from food_search.services.search import FoodSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    search_service: FoodSearchService
    details_service: FoodDetailsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    off_client = HttpxOpenFoodFactsClient.create(resolved_settings.off_base_url)
    search_service = FoodSearchService(
        providers=[
            FdcProvider(
                client=fdc_client,
                page_size=resolved_settings.fdc_page_size,
                data_types=parse_data_types(resolved_settings.fdc_data_types),
            ),
            OpenFoodFactsProvider(
                client=off_client,
                page_size=resolved_settings.off_page_size,
            ),
        ],
        timeout_seconds=resolved_settings.provider_timeout_seconds,
        result_limit=resolved_settings.result_limit,
        debug=resolved_settings.debug,
    )
    details_service = FoodDetailsService(
        fdc_client=fdc_client,
        timeout_seconds=resolved_settings.provider_timeout_seconds,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await fdc_client.close()
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        search_service=search_service,
        details_service=details_service,
        close_resources=close_resources,
    )
