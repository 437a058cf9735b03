"""Request and response models for the HTTP API."""

import datetime

from pydantic import BaseModel, Field

from diet_ledger.domain.goals import CalorieSplit, GoalConfig, GoalType
from diet_ledger.domain.nutrients import MealSlot


class MealLogRequest(BaseModel):
    """Free-form meal description to record against a slot."""

    text: str = Field(min_length=1)
    slot: MealSlot
    date: datetime.date | None = None


class SplitPayload(BaseModel):
    """Percent of the daily calories per slot; need not sum to 100."""

    morning: float = 30.0
    midday: float = 40.0
    evening: float = 30.0


class GoalsPayload(BaseModel):
    """Daily goals as exchanged over HTTP."""

    daily_calories: float = Field(gt=0)
    goal_type: GoalType = GoalType.LOSE
    split: SplitPayload = Field(default_factory=SplitPayload)
    protein_g: float = Field(default=80.0, ge=0)
    fat_g: float = Field(default=40.0, ge=0)
    carbs_g: float = Field(default=150.0, ge=0)

    def to_config(self) -> GoalConfig:
        """Convert to the domain goal configuration."""
        return GoalConfig(
            daily_calories=self.daily_calories,
            goal_type=self.goal_type,
            split=CalorieSplit(
                morning=self.split.morning,
                midday=self.split.midday,
                evening=self.split.evening,
            ),
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )

    @classmethod
    def from_config(cls, goals: GoalConfig) -> "GoalsPayload":
        """Build the payload from the domain goal configuration."""
        return cls(
            daily_calories=goals.daily_calories,
            goal_type=goals.goal_type,
            split=SplitPayload(
                morning=goals.split.morning,
                midday=goals.split.midday,
                evening=goals.split.evening,
            ),
            protein_g=goals.protein_g,
            fat_g=goals.fat_g,
            carbs_g=goals.carbs_g,
        )
