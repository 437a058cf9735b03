"""Summing calories and macros across nutrient items."""

from collections.abc import Iterable

from diet_ledger.domain.nutrients import NutrientItem, Totals
from diet_ledger.services.units import parse_magnitude, round_tenths


def item_totals(item: NutrientItem) -> Totals:
    """Parse an item's four magnitudes into numbers."""
    return Totals(
        kcal=parse_magnitude(item.calories),
        protein=parse_magnitude(item.protein),
        fat=parse_magnitude(item.fat),
        carbs=parse_magnitude(item.carbohydrate),
    )


def sum_totals(values: Iterable[Totals]) -> Totals:
    """Add totals together at full precision."""
    kcal = protein = fat = carbs = 0.0
    for value in values:
        kcal += value.kcal
        protein += value.protein
        fat += value.fat
        carbs += value.carbs
    return Totals(kcal=kcal, protein=protein, fat=fat, carbs=carbs)


def round_totals(totals: Totals) -> Totals:
    """Round every field to one decimal place for presentation."""
    return Totals(
        kcal=round_tenths(totals.kcal),
        protein=round_tenths(totals.protein),
        fat=round_tenths(totals.fat),
        carbs=round_tenths(totals.carbs),
    )


def raw_sum_items(items: Iterable[NutrientItem]) -> Totals:
    """Return unrounded totals for items."""
    return sum_totals(item_totals(item) for item in items)


def sum_items(items: Iterable[NutrientItem]) -> Totals:
    """Return totals for items, rounded to one decimal place."""
    return round_totals(raw_sum_items(items))
