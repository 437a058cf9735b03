"""OpenAI Chat Completions client for meal extraction."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from diet_ledger.services.extraction import ExtractionClient


@dataclass
class OpenAIChatClient(ExtractionClient):
    """Extraction client backed by the OpenAI Chat Completions API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, base_url: str | None = None) -> "OpenAIChatClient":
        """Create an OpenAI chat client."""
        return cls(client=AsyncOpenAI(api_key=api_key, base_url=base_url))

    async def complete(self, *, model: str, prompt: str) -> str | None:
        """Send a single user message and return the first choice's content."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
