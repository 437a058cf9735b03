"""Domain models for daily goals."""

from dataclasses import dataclass, field
from enum import StrEnum

from diet_ledger.domain.nutrients import MealSlot, Totals


class GoalType(StrEnum):
    """Label for what the user is aiming for."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class CalorieSplit:
    """Percent of the daily calorie goal assigned to each meal slot.

    The three values are expected to sum to 100 but this is not enforced.
    """

    morning: float = 30.0
    midday: float = 40.0
    evening: float = 30.0

    def percent_for(self, slot: MealSlot | str) -> float:
        """Return the configured percentage for a slot."""
        resolved = MealSlot(slot)
        if resolved is MealSlot.MORNING:
            return self.morning
        if resolved is MealSlot.MIDDAY:
            return self.midday
        return self.evening

    @property
    def total(self) -> float:
        """Sum of the three percentages."""
        return self.morning + self.midday + self.evening


@dataclass(frozen=True)
class GoalConfig:
    """Daily calorie target, slot split and macro targets."""

    daily_calories: float = 1200.0
    goal_type: GoalType = GoalType.LOSE
    split: CalorieSplit = field(default_factory=CalorieSplit)
    protein_g: float = 80.0
    fat_g: float = 40.0
    carbs_g: float = 150.0

    def targets(self) -> Totals:
        """Return the targets in the same shape as consumed totals."""
        return Totals(
            kcal=self.daily_calories,
            protein=self.protein_g,
            fat=self.fat_g,
            carbs=self.carbs_g,
        )


@dataclass(frozen=True)
class GoalProgress:
    """Consumed totals compared against targets."""

    consumed: Totals
    target: Totals
    remaining: Totals
    percent: Totals
