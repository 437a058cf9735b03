"""Extraction of nutrient items from free-form meal text using an LLM."""

import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from diet_ledger.domain.nutrients import NutrientItem

_logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

EXTRACTION_PROMPT = """\
From the text below, extract every food item as a JSON array in this shape:

[
  {{
    "name": "...",
    "quantity": "...",
    "weight": "...g",
    "calories": "...kcal",
    "protein": "...g",
    "fat": "...g",
    "carbohydrate": "...g"
  }}
]

When the quantity is vague (e.g. "1 slice", "1 piece"), estimate the weight in
grams and put it in "weight". Estimate calories and nutrients from the weight.
Reply with the JSON array only.

Text:
"{text}"
"""


class ExtractionError(RuntimeError):
    """Raised when meal text cannot be turned into nutrient items."""


class MissingCredentialError(ExtractionError):
    """Raised when no API key is configured for the extraction model."""


class ExtractionClient(Protocol):
    """Interface for the chat model used for extraction."""

    async def complete(self, *, model: str, prompt: str) -> str | None:
        """Return the model's reply text, or None if it produced nothing."""


@dataclass
class ExtractionService:
    """Service that prompts the model and validates its reply."""

    client: ExtractionClient | None
    model: str

    async def extract(self, text: str) -> list[NutrientItem]:
        """Extract nutrient items from a free-form meal description."""
        if self.client is None:
            raise MissingCredentialError("OPENAI_API_KEY missing")
        prompt = EXTRACTION_PROMPT.format(text=text)
        try:
            message = await self.client.complete(model=self.model, prompt=prompt)
        except Exception as exc:
            _logger.exception("Extraction request failed")
            raise ExtractionError("Extraction request failed") from exc
        if not message:
            raise ExtractionError("No response from the extraction model")
        return parse_items(message)


def parse_items(message: str) -> list[NutrientItem]:
    """Parse a model reply into nutrient items.

    A JSON array is used as-is, an object with an "ingredients" array uses
    that array, and any other object is treated as a single item.
    """
    try:
        parsed: object = json.loads(_strip_code_fence(message))
    except (ValueError, RecursionError) as exc:
        raise ExtractionError("Model reply was not valid JSON") from exc

    if isinstance(parsed, dict):
        ingredients = parsed.get("ingredients")
        raw_items = ingredients if isinstance(ingredients, list) else [parsed]
    elif isinstance(parsed, list):
        raw_items = parsed
    else:
        raise ExtractionError("Unexpected reply shape")

    try:
        return [NutrientItem.model_validate(raw) for raw in raw_items]
    except ValidationError as exc:
        raise ExtractionError("Model reply did not match the item shape") from exc


def _strip_code_fence(message: str) -> str:
    stripped = message.strip()
    match = _CODE_FENCE.match(stripped)
    if match:
        return match.group(1)
    return stripped
