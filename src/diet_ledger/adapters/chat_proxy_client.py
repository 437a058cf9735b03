"""Pass-through client for the upstream chat completions endpoint."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ChatProxyClient(Protocol):
    """Interface for forwarding a prompt to the language model API."""

    async def forward(self, prompt: str) -> tuple[int, object]:
        """Forward a prompt and return the upstream status and JSON body."""


@dataclass
class HttpxChatProxyClient(ChatProxyClient):
    """HTTPX-backed proxy that holds the API key server-side."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 60.0

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float = 60.0,
    ) -> "HttpxChatProxyClient":
        """Create a proxy client with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def forward(self, prompt: str) -> tuple[int, object]:
        """POST the prompt as a single user message; no retries."""
        response = await self.http_client.post(
            f"{self.base_url.rstrip('/')}/chat/completions",
            headers={"Authorization": f"Bearer {self.api_key}"},
            json={
                "model": self.model,
                "messages": [{"role": "user", "content": prompt}],
            },
            timeout=self.timeout_seconds,
        )
        return response.status_code, response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
