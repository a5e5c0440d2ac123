"""FoodResult models and the structured-output schema sent to the model."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, field_validator


class NutritionEstimate(BaseModel):
    model_config = ConfigDict(frozen=True)

    calories: StrictFloat = Field(ge=0)
    protein: StrictFloat = Field(ge=0)
    carbs: StrictFloat = Field(ge=0)
    fat: StrictFloat = Field(ge=0)


class FoodResult(BaseModel):
    """One classified dish. Serialize with by_alias=True for wire field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(min_length=1)
    portion_size: str = Field(default="", alias="portionSize")
    nutrition: NutritionEstimate
    error: Optional[str] = None

    @field_validator("portion_size", mode="before")
    @classmethod
    def _omitted_portion(cls, value: object) -> object:
        return "" if value is None else value

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


NUTRITION_SCHEMA = {
    "type": "object",
    "properties": {
        "calories": {
            "type": "number",
            "description": "Estimated calories for the portion.",
        },
        "protein": {
            "type": "number",
            "description": "Estimated grams of protein.",
        },
        "carbs": {
            "type": "number",
            "description": "Estimated grams of carbohydrates.",
        },
        "fat": {
            "type": "number",
            "description": "Estimated grams of fat.",
        },
    },
    "required": ["calories", "protein", "carbs", "fat"],
}

FOOD_DETECTION_SCHEMA = {
    "type": "object",
    "properties": {
        "error": {
            "type": "string",
            "description": (
                "An error message if the food is not recognized "
                "or the image has no food."
            ),
        },
        "name": {
            "type": "string",
            "description": "The name of the detected dish or food.",
        },
        "portionSize": {
            "type": "string",
            "description": (
                'A typical serving size, e.g., "1 unit", "1 plate", '
                '"1 slice", "1 bowl", "100g".'
            ),
        },
        "nutrition": NUTRITION_SCHEMA,
    },
}
