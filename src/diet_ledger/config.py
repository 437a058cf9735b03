"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from diet_ledger.domain.goals import CalorieSplit, GoalConfig, GoalType

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"
    openai_base_url: str = "https://api.openai.com/v1"
    proxy_timeout_seconds: float = 60.0
    timezone: str | None = None
    log_level: str = "INFO"
    goal_calories: float = 1200.0
    goal_type: GoalType = GoalType.LOSE
    split_morning: float = 30.0
    split_midday: float = 40.0
    split_evening: float = 30.0
    goal_protein_g: float = 80.0
    goal_fat_g: float = 40.0
    goal_carbs_g: float = 150.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def goal_config(self) -> GoalConfig:
        """Build the initial goal configuration."""
        return GoalConfig(
            daily_calories=self.goal_calories,
            goal_type=self.goal_type,
            split=CalorieSplit(
                morning=self.split_morning,
                midday=self.split_midday,
                evening=self.split_evening,
            ),
            protein_g=self.goal_protein_g,
            fat_g=self.goal_fat_g,
            carbs_g=self.goal_carbs_g,
        )
