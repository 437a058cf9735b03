"""Comparing consumed totals with the user's goals."""

from diet_ledger.domain.goals import GoalConfig, GoalProgress
from diet_ledger.domain.nutrients import MealSlot, Totals
from diet_ledger.services.aggregation import round_totals
from diet_ledger.services.budget import slot_budget


def budget_for(goals: GoalConfig, slot: MealSlot | str) -> float:
    """Return the calorie budget for a slot under the given goals."""
    return slot_budget(goals.daily_calories, goals.split, slot)


def compare_to_goals(totals: Totals, goals: GoalConfig) -> GoalProgress:
    """Report remaining amounts and percent of target for each nutrient."""
    target = goals.targets()
    remaining = Totals(
        kcal=target.kcal - totals.kcal,
        protein=target.protein - totals.protein,
        fat=target.fat - totals.fat,
        carbs=target.carbs - totals.carbs,
    )
    percent = Totals(
        kcal=_percent(totals.kcal, target.kcal),
        protein=_percent(totals.protein, target.protein),
        fat=_percent(totals.fat, target.fat),
        carbs=_percent(totals.carbs, target.carbs),
    )
    return GoalProgress(
        consumed=totals,
        target=target,
        remaining=round_totals(remaining),
        percent=round_totals(percent),
    )


def _percent(value: float, target: float) -> float:
    if target == 0:
        return 0.0
    return value / target * 100
