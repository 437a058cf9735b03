"""Per-slot calorie budgets."""

from diet_ledger.domain.goals import CalorieSplit
from diet_ledger.domain.nutrients import MealSlot


def slot_budget(
    goal_calories: float, split: CalorieSplit, slot: MealSlot | str
) -> float:
    """Return the slot's share of the daily calorie goal.

    No clamping or renormalisation: a split that does not sum to 100, a
    negative percentage or a negative goal pass straight through.
    """
    return goal_calories * split.percent_for(slot) / 100
