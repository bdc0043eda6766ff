"""Provider strategies that turn reference-database payloads into candidates."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from food_search.adapters.fdc_client import FdcClient
from food_search.adapters.open_food_facts_client import OpenFoodFactsClient
from food_search.domain.foods import MacroProfile, RawCandidate

_FDC_NUTRIENT_IDS = {
    "calories": 1008,
    "protein": 1003,
    "fat": 1004,
    "carbs": 1005,
}

_OFF_NUTRIMENT_KEYS = {
    "calories": ("energy-kcal_100g", "energy-kcal"),
    "protein": ("proteins_100g", "proteins"),
    "fat": ("fat_100g", "fat"),
    "carbs": ("carbohydrates_100g", "carbohydrates"),
}


class ProviderPayloadError(ValueError):
    """Raised when a provider response is not shaped like the API promises."""


class FoodProvider(Protocol):
    """A reference database that can be searched for candidate foods."""

    name: str
    uses_normalized_query: bool
    rewards_data_quality: bool

    async def lookup(self, query: str) -> list[RawCandidate]:
        """Return candidates for a query, or raise on failure."""


@dataclass
class FdcProvider(FoodProvider):
    """USDA FoodData Central, searched over generic food data types."""

    client: FdcClient
    page_size: int = 20
    data_types: list[str] = field(
        default_factory=lambda: ["Foundation", "SR Legacy"]
    )
    name: str = "usda_fdc"
    uses_normalized_query: bool = True
    rewards_data_quality: bool = False

    async def lookup(self, query: str) -> list[RawCandidate]:
        """Search FDC and parse the foods it returns."""
        payload = await self.client.search_foods(
            query, page_size=self.page_size, data_types=self.data_types
        )
        return parse_fdc_search(payload)


@dataclass
class OpenFoodFactsProvider(FoodProvider):
    """OpenFoodFacts community product database."""

    client: OpenFoodFactsClient
    page_size: int = 10
    name: str = "open_food_facts"
    uses_normalized_query: bool = False
    rewards_data_quality: bool = True

    async def lookup(self, query: str) -> list[RawCandidate]:
        """Search OpenFoodFacts and parse the products it returns."""
        payload = await self.client.search_products(query, page_size=self.page_size)
        return parse_off_search(payload)


def parse_fdc_search(payload: object) -> list[RawCandidate]:
    """Parse an FDC foods/search response, dropping malformed foods."""
    foods = _require_mapping(payload, "FDC search").get("foods") or []
    if not isinstance(foods, list):
        raise ProviderPayloadError("FDC search 'foods' is not a list")
    candidates = []
    for food in foods:
        if not isinstance(food, Mapping):
            continue
        candidate = _fdc_candidate(food)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def parse_fdc_food(payload: object) -> RawCandidate | None:
    """Parse a single FDC food response."""
    return _fdc_candidate(_require_mapping(payload, "FDC food"))


def parse_off_search(payload: object) -> list[RawCandidate]:
    """Parse an OpenFoodFacts search response, dropping malformed products."""
    products = _require_mapping(payload, "OpenFoodFacts search").get("products") or []
    if not isinstance(products, list):
        raise ProviderPayloadError("OpenFoodFacts 'products' is not a list")
    candidates = []
    for product in products:
        if not isinstance(product, Mapping):
            continue
        candidate = _off_candidate(product)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def extract_fdc_macros(food_nutrients: list[object]) -> MacroProfile:
    """Extract calories, protein, fat, carbs from FDC nutrients.

    Search results carry ``nutrientId``/``value`` while food details carry
    ``nutrient.id``/``amount``; both shapes are accepted.
    """
    values = dict.fromkeys(_FDC_NUTRIENT_IDS, 0.0)
    for nutrient in food_nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient.get("nutrientId")
        if nutrient_id is None and isinstance(nutrient_info, Mapping):
            nutrient_id = nutrient_info.get("id")
        amount = nutrient.get("value", nutrient.get("amount"))
        for key, expected_id in _FDC_NUTRIENT_IDS.items():
            if nutrient_id == expected_id and amount is not None:
                values[key] = to_amount(amount)

    return MacroProfile(
        calories=values["calories"],
        protein_g=values["protein"],
        fat_g=values["fat"],
        carbs_g=values["carbs"],
    )


def to_amount(value: object) -> float:
    """Coerce a provider number to a finite, non-negative float."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _fdc_candidate(food: Mapping[str, object]) -> RawCandidate | None:
    description = _clean_text(food.get("description"))
    nutrients = food.get("foodNutrients")
    if not description or not isinstance(nutrients, list) or not nutrients:
        return None
    fdc_id = food.get("fdcId")
    return RawCandidate(
        description=description,
        macros=extract_fdc_macros(nutrients),
        source_ref=str(fdc_id) if fdc_id is not None else None,
    )


def _off_candidate(product: Mapping[str, object]) -> RawCandidate | None:
    nutriments = product.get("nutriments")
    name = _clean_text(product.get("product_name")) or _clean_text(
        product.get("product_name_en")
    )
    if not name or not isinstance(nutriments, Mapping):
        return None
    values = {
        key: _first_amount(nutriments, keys)
        for key, keys in _OFF_NUTRIMENT_KEYS.items()
    }
    code = product.get("code")
    return RawCandidate(
        description=name,
        macros=MacroProfile(
            calories=values["calories"],
            protein_g=values["protein"],
            fat_g=values["fat"],
            carbs_g=values["carbs"],
        ),
        serving_size=_clean_text(product.get("serving_size")) or None,
        source_ref=str(code) if code else None,
        popular=bool(product.get("popularity_tags")),
    )


def _first_amount(nutriments: Mapping[str, object], keys: tuple[str, ...]) -> float:
    for key in keys:
        amount = to_amount(nutriments.get(key))
        if amount:
            return amount
    return 0.0


def _clean_text(value: object) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _require_mapping(payload: object, label: str) -> Mapping[str, object]:
    if not isinstance(payload, Mapping):
        raise ProviderPayloadError(f"{label} payload is not an object")
    return payload
