"""OpenAI Responses API client for food photo analysis."""

import json
import logging
from dataclasses import dataclass

from openai import AsyncOpenAI

from fitness_tracker.services.vision import VisionClient

_logger = logging.getLogger(__name__)


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Send one photo and return the meal analysis as a dict."""
        response = await self.client.responses.create(
            **build_meal_request(
                model=model,
                reasoning_effort=reasoning_effort,
                store=store,
                image_data_url=image_data_url,
                schema=schema,
                prompt=prompt,
            )
        )
        _logger.debug("Meal analysis response %s", getattr(response, "id", None))
        if not response.output_text:
            raise RuntimeError("OpenAI returned an empty meal analysis")
        try:
            payload = json.loads(response.output_text)
        except json.JSONDecodeError as exc:
            raise RuntimeError("OpenAI returned malformed meal analysis") from exc
        if not isinstance(payload, dict):
            raise RuntimeError("OpenAI returned malformed meal analysis")
        return payload


def build_meal_request(  # noqa: PLR0913
    *,
    model: str,
    reasoning_effort: str | None,
    store: bool,
    image_data_url: str,
    schema: dict[str, object],
    prompt: str,
) -> dict[str, object]:
    """Build a Responses API request with a strict meal schema."""
    request: dict[str, object] = {
        "model": model,
        "input": [
            {
                "role": "user",
                "content": [
                    {"type": "input_text", "text": prompt},
                    {"type": "input_image", "image_url": image_data_url},
                ],
            }
        ],
        "text": {
            "format": {
                "type": "json_schema",
                "name": "meal_analysis",
                "strict": True,
                "schema": schema,
            }
        },
        "store": store,
    }
    if reasoning_effort:
        request["reasoning"] = {"effort": reasoning_effort}
    return request
