"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from food_search.api.models import FoodItemModel, FoodSearchResponse
from food_search.app_logging import configure_logging
from food_search.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(
        logging.DEBUG if container.settings.debug else logging.INFO
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/search")
    async def search_foods(q: str, request: Request) -> dict[str, object]:
        """Return ranked foods for a free-text query."""
        state_container: AppContainer = request.app.state.container
        items = await state_container.search_service.search(q)
        response = FoodSearchResponse(
            items=[FoodItemModel.from_domain(item) for item in items]
        )
        return response.model_dump(by_alias=True)

    @app.get("/foods/{fdc_id}")
    async def food_details(fdc_id: int, request: Request) -> dict[str, object]:
        """Return a single FDC food."""
        state_container: AppContainer = request.app.state.container
        item = await state_container.details_service.get_food_details(fdc_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return FoodItemModel.from_domain(item).model_dump(by_alias=True)

    return app
