"""Tests for the nutrient item wire model."""

import pytest
from pydantic import ValidationError

from diet_ledger.domain.nutrients import NutrientItem


def test_item_accepts_english_keys_and_serializes_without_absent_fields() -> None:
    item = NutrientItem.model_validate(
        {"name": "egg", "quantity": "1", "calories": "80kcal", "extra": "ignored"}
    )

    assert item.to_wire() == {"name": "egg", "quantity": "1", "calories": "80kcal"}


def test_item_accepts_japanese_keys() -> None:
    item = NutrientItem.model_validate(
        {
            "材料名": "鶏むね肉",
            "数量": "1枚",
            "重量": "100g",
            "カロリー": "120kcal",
            "たんぱく質": "23g",
            "脂質": "2g",
            "炭水化物": "0g",
        }
    )

    assert item.name == "鶏むね肉"
    assert item.weight == "100g"
    assert item.carbohydrate == "0g"
    assert "carbohydrate" in item.to_wire()


def test_item_coerces_numeric_values_to_text() -> None:
    item = NutrientItem.model_validate({"name": "apple", "calories": 95, "fat": 0.3})

    assert item.calories == "95"
    assert item.fat == "0.3"


def test_item_requires_name() -> None:
    with pytest.raises(ValidationError):
        NutrientItem.model_validate({"calories": "10kcal"})


def test_item_is_immutable() -> None:
    item = NutrientItem(name="egg")

    with pytest.raises(ValidationError):
        item.calories = "1kcal"
