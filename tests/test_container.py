"""Tests for container wiring."""

import asyncio

from diet_ledger.config import Settings
from diet_ledger.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.chat_proxy is not None
    assert container.extraction_service.client is not None
    assert container.tracking_service.goals.daily_calories == 1200
    asyncio.run(container.close_resources())


def test_build_container_without_api_key() -> None:
    container = build_container(Settings(openai_api_key=None))

    assert container.chat_proxy is None
    assert container.extraction_service.client is None
    asyncio.run(container.close_resources())
