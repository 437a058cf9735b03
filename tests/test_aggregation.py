"""Tests for the nutrient aggregator."""

import itertools

from diet_ledger.domain.nutrients import NutrientItem, Totals
from diet_ledger.services.aggregation import raw_sum_items, sum_items
from tests.conftest import CHICKEN_BREAST, RICE, make_item


def test_sum_items_adds_all_four_nutrients() -> None:
    items = [
        NutrientItem.model_validate(CHICKEN_BREAST),
        NutrientItem.model_validate(RICE),
    ]

    totals = sum_items(items)

    assert totals == Totals(kcal=452.0, protein=43.8, fat=5.5, carbs=55.7)


def test_sum_items_empty_is_zero() -> None:
    assert sum_items([]) == Totals.zero()


def test_sum_items_treats_missing_and_garbled_fields_as_zero() -> None:
    items = [
        NutrientItem(name="water"),
        make_item(calories="unknown", protein="?", fat=None, carbohydrate="n/a"),
    ]

    assert sum_items(items) == Totals.zero()


def test_sum_items_rounds_to_one_decimal() -> None:
    items = [
        make_item(calories="0.04kcal", protein="0.04g", fat="0.04g"),
        make_item(calories="0.04kcal", protein="0.04g", fat="0.04g"),
    ]

    totals = sum_items(items)

    assert totals.kcal == 0.1
    assert totals.protein == 0.1
    assert raw_sum_items(items).kcal == 0.08


def test_sum_items_is_order_independent() -> None:
    items = [
        make_item(calories="100.1kcal", protein="1.1g"),
        make_item(calories="0.2kcal", protein="2.2g"),
        make_item(calories="33.3kcal", protein="3.3g"),
    ]

    results = {sum_items(list(order)) for order in itertools.permutations(items)}

    assert len(results) == 1
