import json
import logging
import re
from typing import Any

import anthropic

from settings import Settings
from services.errors import MalformedJson, NoJsonFound, ServiceError

logger = logging.getLogger(__name__)

# field -> example value shown to the model
ENRICHED_FIELD_HINTS = {
    "industry": '"primary industry"',
    "employee_range": '"estimated count like 50-200"',
    "revenue_range": '"estimated annual revenue"',
    "headquarters": '"city, country"',
    "founded_year": '"year or null"',
    "tech_stack": '["technology1", "technology2", "technology3"]',
    "pain_points": '["challenge1", "challenge2"]',
    "decision_maker": '"typical buyer title"',
    "linkedin_url": '"best guess at company linkedin"',
    "ideal_pitch": '"30 word pitch for selling to them"',
    "buying_signals": '["signal1", "signal2"]',
}
ENRICHED_FIELDS = tuple(ENRICHED_FIELD_HINTS)

# greedy: first "{" to last "}"
JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def build_prompt(company_name: str) -> str:
    fields = ",\n".join(f'  "{key}": {hint}' for key, hint in ENRICHED_FIELD_HINTS.items())
    return (
        f'Research "{company_name}" and return ONLY a JSON object with:\n'
        f"{{\n{fields}\n}}\n"
        "\n"
        "Be specific and actionable. No markdown, just JSON."
    )


def extract_json_object(text: str) -> dict[str, Any]:
    """Pull the JSON object out of a free-text model reply.

    The reply may wrap the object in prose or markdown fences. Everything
    between the first "{" and the last "}" is parsed; the shape of the
    resulting object is not checked.
    """
    match = JSON_OBJECT_PATTERN.search(text or "")
    if not match:
        raise NoJsonFound("No JSON in response")

    try:
        return json.loads(match.group(0))
    except (json.JSONDecodeError, RecursionError) as exc:
        raise MalformedJson(f"Invalid JSON in response: {exc}") from exc


class EnrichmentClient:
    def __init__(self, settings: Settings, client: anthropic.AsyncAnthropic | None = None):
        self.settings = settings
        self._client = client
        if self._client is None and settings.anthropic_api_key:
            self._client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    async def _complete(self, prompt: str) -> str:
        if self._client is None:
            raise ServiceError("ANTHROPIC_API_KEY is not configured")

        try:
            message = await self._client.messages.create(
                model=self.settings.anthropic_model,
                max_tokens=self.settings.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            raise ServiceError(f"Anthropic request failed: {exc!r}") from exc

        if not message.content:
            raise ServiceError("Empty response from Anthropic")
        text = getattr(message.content[0], "text", None)
        if text is None:
            raise ServiceError("First response block has no text")
        return text

    async def enrich(self, company_name: str) -> dict[str, Any]:
        logger.debug("Enriching %s with %s", company_name, self.settings.anthropic_model)
        response_text = await self._complete(build_prompt(company_name))
        return extract_json_object(response_text)
