"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from diet_ledger.adapters.chat_proxy_client import ChatProxyClient
from diet_ledger.config import Settings
from diet_ledger.containers import AppContainer
from diet_ledger.domain.nutrients import NutrientItem
from diet_ledger.services.extraction import ExtractionClient, ExtractionService
from diet_ledger.services.ledger import DailyLedger
from diet_ledger.services.tracking import MealTrackingService

CHICKEN_BREAST = {
    "name": "chicken breast",
    "weight": "150g",
    "calories": "200kcal",
    "protein": "40g",
    "fat": "5g",
    "carbohydrate": "0g",
}

RICE = {
    "name": "rice",
    "quantity": "1 bowl",
    "weight": "150g",
    "calories": "252kcal",
    "protein": "3.8g",
    "fat": "0.5g",
    "carbohydrate": "55.7g",
}


def make_item(**overrides: object) -> NutrientItem:
    """Build a nutrient item from the chicken breast defaults."""
    return NutrientItem.model_validate({**CHICKEN_BREAST, **overrides})


@dataclass
class FakeExtractionClient(ExtractionClient):
    """Fake extraction client returning a fixed reply."""

    reply: str | None = field(default_factory=lambda: json.dumps([CHICKEN_BREAST]))
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def complete(self, *, model: str, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@dataclass
class FakeChatProxy(ChatProxyClient):
    """Fake proxy that records prompts and returns a canned upstream reply."""

    status_code: int = 200
    payload: object = field(
        default_factory=lambda: {
            "choices": [{"message": {"role": "assistant", "content": "[]"}}]
        }
    )
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def forward(self, prompt: str) -> tuple[int, object]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.status_code, self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", timezone=None)


@pytest.fixture
def extraction_client() -> FakeExtractionClient:
    return FakeExtractionClient()


@pytest.fixture
def chat_proxy() -> FakeChatProxy:
    return FakeChatProxy()


@pytest.fixture
def container(
    settings: Settings,
    extraction_client: FakeExtractionClient,
    chat_proxy: FakeChatProxy,
) -> AppContainer:
    extraction_service = ExtractionService(
        client=extraction_client,
        model=settings.openai_model,
    )
    tracking_service = MealTrackingService(
        extraction_service=extraction_service,
        ledger=DailyLedger(),
        goals=settings.goal_config(),
        timezone=settings.timezone,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        chat_proxy=chat_proxy,
        extraction_service=extraction_service,
        tracking_service=tracking_service,
        close_resources=close_resources,
    )
