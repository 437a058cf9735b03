"""Nutrient domain models."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class MealSlot(StrEnum):
    """Fixed daily eating periods."""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"


@dataclass(frozen=True)
class Totals:
    """Calories and macronutrient grams for one or more items."""

    kcal: float
    protein: float
    fat: float
    carbs: float

    @classmethod
    def zero(cls) -> "Totals":
        """Return all-zero totals."""
        return cls(kcal=0.0, protein=0.0, fat=0.0, carbs=0.0)

    def scaled(self, factor: float) -> "Totals":
        """Return totals multiplied by a factor."""
        return Totals(
            kcal=self.kcal * factor,
            protein=self.protein * factor,
            fat=self.fat * factor,
            carbs=self.carbs * factor,
        )


class NutrientItem(BaseModel):
    """One extracted ingredient with unit-suffixed magnitudes."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(validation_alias=AliasChoices("name", "材料名"))
    quantity: str | None = Field(
        default=None, validation_alias=AliasChoices("quantity", "数量")
    )
    weight: str | None = Field(
        default=None, validation_alias=AliasChoices("weight", "重量")
    )
    calories: str | None = Field(
        default=None, validation_alias=AliasChoices("calories", "カロリー")
    )
    protein: str | None = Field(
        default=None, validation_alias=AliasChoices("protein", "たんぱく質")
    )
    fat: str | None = Field(
        default=None, validation_alias=AliasChoices("fat", "脂質")
    )
    carbohydrate: str | None = Field(
        default=None,
        validation_alias=AliasChoices("carbohydrate", "carbohydrates", "炭水化物"),
    )

    @field_validator(
        "name",
        "quantity",
        "weight",
        "calories",
        "protein",
        "fat",
        "carbohydrate",
        mode="before",
    )
    @classmethod
    def _numbers_as_text(cls, value: object) -> object:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    def to_wire(self) -> dict[str, str]:
        """Return the item in its JSON wire shape, omitting absent fields."""
        return self.model_dump(exclude_none=True)
