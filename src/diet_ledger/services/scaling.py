"""Proportional rescaling of a meal to a calorie budget."""

from collections.abc import Sequence
from dataclasses import dataclass

from diet_ledger.domain.nutrients import NutrientItem, Totals
from diet_ledger.services.aggregation import (
    item_totals,
    round_totals,
    sum_totals,
)
from diet_ledger.services.units import format_grams, format_kcal


@dataclass(frozen=True)
class ScaledMeal:
    """Rescaled items and their rounded totals."""

    items: tuple[NutrientItem, ...]
    totals: Totals
    factor: float


def scale_meal(items: Sequence[NutrientItem], target_budget: float) -> ScaledMeal:
    """Rescale every item so the meal's calories match ``target_budget``.

    The factor is computed from unrounded sums. When the meal's calorie
    total is exactly zero the divisor falls back to 1.
    """
    parsed = [item_totals(item) for item in items]
    raw_kcal = sum_totals(parsed).kcal
    base = raw_kcal if raw_kcal != 0 else 1.0
    factor = target_budget / base

    scaled_values = [values.scaled(factor) for values in parsed]
    scaled_items = tuple(
        _with_values(item, values)
        for item, values in zip(items, scaled_values, strict=True)
    )
    return ScaledMeal(
        items=scaled_items,
        totals=round_totals(sum_totals(scaled_values)),
        factor=factor,
    )


def _with_values(item: NutrientItem, values: Totals) -> NutrientItem:
    return item.model_copy(
        update={
            "calories": format_kcal(values.kcal),
            "protein": format_grams(values.protein),
            "fat": format_grams(values.fat),
            "carbohydrate": format_grams(values.carbs),
        }
    )
