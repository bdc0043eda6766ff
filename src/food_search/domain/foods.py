"""Food search domain models."""

import math
from dataclasses import dataclass

DEFAULT_SERVING_SIZE = "100g"
# Upper bound for any single macro value a provider can plausibly report.
MAX_MACRO_AMOUNT = 10_000.0


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a food item."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    @property
    def is_empty(self) -> bool:
        """Return True when every macro is zero."""
        return (
            self.calories == 0
            and self.protein_g == 0
            and self.fat_g == 0
            and self.carbs_g == 0
        )

    @property
    def is_plausible(self) -> bool:
        """Return True when every macro is a finite amount within bounds."""
        return all(
            math.isfinite(value) and 0 <= value <= MAX_MACRO_AMOUNT
            for value in (self.calories, self.protein_g, self.fat_g, self.carbs_g)
        )

    @property
    def is_complete(self) -> bool:
        """Return True when every macro is strictly positive."""
        return (
            self.calories > 0
            and self.protein_g > 0
            and self.fat_g > 0
            and self.carbs_g > 0
        )


@dataclass(frozen=True)
class RawCandidate:
    """A food record as returned by a provider."""

    description: str
    macros: MacroProfile
    serving_size: str | None = None
    source_ref: str | None = None
    popular: bool = False


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate ranked against a single query."""

    candidate: RawCandidate
    simplified_name: str
    score: float
    source_provider: str


@dataclass(frozen=True)
class FoodItem:
    """Public search result with display-ready values."""

    name: str
    serving_size: str
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float
