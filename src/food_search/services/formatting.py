"""Display rounding for search results."""

import math

from food_search.domain.foods import DEFAULT_SERVING_SIZE, FoodItem, RawCandidate


def round_calories(value: float) -> int:
    """Round calories half-up to a whole number."""
    return math.floor(value + 0.5)


def round_grams(value: float) -> float:
    """Round a gram amount half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def to_food_item(name: str, candidate: RawCandidate) -> FoodItem:
    """Build the public result for a candidate under a display name."""
    macros = candidate.macros
    return FoodItem(
        name=name,
        serving_size=candidate.serving_size or DEFAULT_SERVING_SIZE,
        calories=round_calories(macros.calories),
        protein_g=round_grams(macros.protein_g),
        carbs_g=round_grams(macros.carbs_g),
        fat_g=round_grams(macros.fat_g),
    )
