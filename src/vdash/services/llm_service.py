import logging
from typing import List

import openai

from ..core.config import settings
from ..core.errors import SuggestionEngineUnavailable

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a YouTube optimization expert who creates engaging, "
    "SEO-friendly video titles."
)

TITLE_PROMPT = """Given the following YouTube video title and description, suggest 3 improved title variations that are:
- More engaging and click-worthy
- SEO optimized
- Clear and descriptive
- Between 50-70 characters

Current Title: "{title}"
Description: "{description}"

Provide exactly 3 alternative titles, one per line, without numbering or additional formatting."""


def parse_suggestions(raw: str, limit: int = 3) -> List[str]:
    lines = [line.strip() for line in (raw or "").splitlines()]
    return [line for line in lines if line][:limit]


class TitleSuggester:
    """Asks the chat model for alternative titles and returns its raw text."""

    def __init__(self, client: openai.AsyncOpenAI | None = None):
        self._client = client

    def _get_client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            if not settings.openai_api_key:
                raise SuggestionEngineUnavailable("OPENAI_API_KEY is not configured")
            self._client = openai.AsyncOpenAI(api_key=settings.openai_api_key)
        return self._client

    async def complete(self, title: str, description: str = "") -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=settings.openai_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {
                        "role": "user",
                        "content": TITLE_PROMPT.format(title=title, description=description),
                    },
                ],
                temperature=settings.openai_temperature,
                max_tokens=settings.openai_max_tokens,
            )
        except openai.OpenAIError as exc:
            logger.error("title suggestion failed: %s", exc)
            raise SuggestionEngineUnavailable(str(exc)) from exc
        if not response.choices:
            logger.error("title suggestion returned no choices")
            raise SuggestionEngineUnavailable("Suggestion engine returned no choices")
        return response.choices[0].message.content or ""
