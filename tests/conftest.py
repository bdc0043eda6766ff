"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from food_search.adapters.fdc_client import FdcClient
from food_search.config import Settings
from food_search.containers import AppContainer
from food_search.domain.foods import MacroProfile, RawCandidate
from food_search.services.details import FoodDetailsService
from food_search.services.providers import FoodProvider
from food_search.services.search import FoodSearchService


def candidate(
    description: str,
    calories: float = 100,
    protein_g: float = 2,
    fat_g: float = 1,
    carbs_g: float = 20,
    **kwargs: object,
) -> RawCandidate:
    """Build a raw candidate with sensible macros."""
    return RawCandidate(
        description=description,
        macros=MacroProfile(
            calories=calories, protein_g=protein_g, fat_g=fat_g, carbs_g=carbs_g
        ),
        **kwargs,  # type: ignore[arg-type]
    )


@dataclass
class FakeProvider(FoodProvider):
    """Provider returning fixed candidates and recording queries."""

    candidates: list[RawCandidate] = field(default_factory=list)
    error: BaseException | None = None
    delay_seconds: float = 0.0
    name: str = "fake"
    uses_normalized_query: bool = True
    rewards_data_quality: bool = False
    queries: list[str] = field(default_factory=list)

    async def lookup(self, query: str) -> list[RawCandidate]:
        self.queries.append(query)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return list(self.candidates)


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with a single known food."""

    food_calls: int = 0

    async def search_foods(
        self,
        query: str,
        page_size: int = 20,
        data_types: list[str] | None = None,
    ) -> dict[str, object]:
        return {"foods": []}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls += 1
        if fdc_id != 168878:
            raise LookupError(fdc_id)
        return {
            "fdcId": fdc_id,
            "description": "Rice, white, long-grain, regular, enriched, cooked",
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 130.4},
                {"nutrient": {"id": 1003}, "amount": 2.69},
                {"nutrient": {"id": 1004}, "amount": 0.28},
                {"nutrient": {"id": 1005}, "amount": 28.17},
            ],
        }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fdc_base_url="https://fdc.test",
        off_base_url="https://off.test",
    )


@pytest.fixture
def primary() -> FakeProvider:
    return FakeProvider(
        name="primary",
        candidates=[
            candidate("Rice flour, white"),
            candidate("Rice, white, long-grain, regular, cooked", calories=130.4),
            candidate("Rice, white, long-grain, regular, raw", calories=365),
            candidate("Rice, brown, long-grain, cooked", calories=123),
        ],
    )


@pytest.fixture
def secondary() -> FakeProvider:
    return FakeProvider(
        name="secondary",
        uses_normalized_query=False,
        rewards_data_quality=True,
        candidates=[
            candidate("Basmati rice", serving_size="75 g", popular=True),
        ],
    )


@pytest.fixture
def container(
    settings: Settings, primary: FakeProvider, secondary: FakeProvider
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        search_service=FoodSearchService(providers=[primary, secondary]),
        details_service=FoodDetailsService(fdc_client=FakeFdcClient()),
        close_resources=close_resources,
    )
