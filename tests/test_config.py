"""Tests for settings."""

from diet_ledger.config import Settings
from diet_ledger.domain.goals import GoalType


def test_goal_config_from_settings() -> None:
    settings = Settings(
        openai_api_key="key",
        goal_calories=1800,
        goal_type="gain",
        split_morning=20,
        split_midday=50,
        split_evening=20,
        goal_protein_g=120,
    )

    goals = settings.goal_config()

    assert goals.daily_calories == 1800
    assert goals.goal_type is GoalType.GAIN
    assert goals.split.total == 90
    assert goals.protein_g == 120
    assert goals.fat_g == 40


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-test")
    monkeypatch.setenv("SPLIT_EVENING", "35")

    settings = Settings()

    assert settings.openai_api_key == "env-key"
    assert settings.openai_model == "gpt-test"
    assert settings.split_evening == 35
