"""AI provider client.

One chat completion per call, no retries. A missing API key, a timeout or any
API/transport error surfaces as ``ProviderUnavailableError`` so callers never
charge usage for a failed call.
"""

import logging

import httpx
import openai
from openai import AsyncOpenAI

from app.config import Settings, settings
from app.utils.exceptions import ProviderUnavailableError

logger = logging.getLogger(__name__)


class AIProvider:
    def __init__(self, config: Settings):
        self._api_key = config.openai_api_key
        self.model = config.openai_model
        self.timeout = config.openai_timeout_seconds
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self._api_key:
                logger.error("OPENAI_API_KEY is not set, AI generation is unavailable")
                raise ProviderUnavailableError()
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                max_retries=0,
                timeout=httpx.Timeout(self.timeout, connect=10.0),
            )
        return self._client

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Run one completion and return the message text ("" when empty)."""
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except (openai.OpenAIError, httpx.HTTPError) as e:
            logger.error(f"AI provider call failed: {type(e).__name__}: {e}", exc_info=True)
            raise ProviderUnavailableError() from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


# Global instance
ai_provider = AIProvider(settings)
