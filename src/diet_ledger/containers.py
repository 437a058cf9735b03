"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from diet_ledger.adapters.chat_proxy_client import (
    ChatProxyClient,
    HttpxChatProxyClient,
)
from diet_ledger.adapters.openai_chat_client import OpenAIChatClient
from diet_ledger.config import Settings
from diet_ledger.services.extraction import ExtractionService
from diet_ledger.services.ledger import DailyLedger
from diet_ledger.services.tracking import MealTrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    chat_proxy: ChatProxyClient | None
    extraction_service: ExtractionService
    tracking_service: MealTrackingService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Without an API key the proxy and extraction client are left unset so
    requests report the misconfiguration instead of failing at startup.
    """
    resolved_settings = settings or Settings()
    api_key = resolved_settings.openai_api_key
    chat_proxy: HttpxChatProxyClient | None = None
    openai_client: OpenAIChatClient | None = None
    if api_key:
        chat_proxy = HttpxChatProxyClient.create(
            api_key=api_key,
            model=resolved_settings.openai_model,
            base_url=resolved_settings.openai_base_url,
            timeout_seconds=resolved_settings.proxy_timeout_seconds,
        )
        openai_client = OpenAIChatClient.create(
            api_key, base_url=resolved_settings.openai_base_url
        )
    extraction_service = ExtractionService(
        client=openai_client,
        model=resolved_settings.openai_model,
    )
    tracking_service = MealTrackingService(
        extraction_service=extraction_service,
        ledger=DailyLedger(),
        goals=resolved_settings.goal_config(),
        timezone=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        if chat_proxy is not None:
            await chat_proxy.close()
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        chat_proxy=chat_proxy,
        extraction_service=extraction_service,
        tracking_service=tracking_service,
        close_resources=close_resources,
    )
