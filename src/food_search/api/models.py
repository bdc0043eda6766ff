"""Pydantic models for food search responses."""

from pydantic import BaseModel, ConfigDict, Field

from food_search.domain.foods import FoodItem


class MacrosModel(BaseModel):
    """Rounded macronutrients for one serving."""

    calories: int
    protein: float
    carbs: float
    fat: float


class FoodItemModel(BaseModel):
    """Food item as exposed to API clients."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    serving_size: str = Field(alias="servingSize")
    macros: MacrosModel

    @classmethod
    def from_domain(cls, item: FoodItem) -> "FoodItemModel":
        """Build the response model from a domain food item."""
        return cls(
            name=item.name,
            serving_size=item.serving_size,
            macros=MacrosModel(
                calories=item.calories,
                protein=item.protein_g,
                carbs=item.carbs_g,
                fat=item.fat_g,
            ),
        )


class FoodSearchResponse(BaseModel):
    """Search results payload."""

    items: list[FoodItemModel]
