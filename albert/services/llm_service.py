"""
LLM Service - text completions through an OpenAI-compatible endpoint.

Used by every stage that needs plain generation: the status categoriser,
the question generator, the script writer and the image prompt composer.
"""
import logging
from typing import Dict, List, Optional

from openai import AsyncOpenAI

from .exceptions import LLMServiceError, ServiceUnavailable

logger = logging.getLogger(__name__)


class LLMService:
    """
    Chat completion client.

    Defaults to Groq's OpenAI-compatible API; any compatible endpoint works
    by changing LLM_BASE_URL / LLM_MODEL.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        from albert.config import config
        self.api_key = api_key or config.ai.groq_api_key or ""
        self.model = model or config.ai.llm_model
        self.base_url = base_url or config.ai.llm_base_url
        timeout = timeout or config.ai.http_timeout

        if not self.api_key or self.api_key.startswith("PASTE_"):
            logger.warning("[LLM] API key not configured - text completion disabled")
            self.api_key = ""
            self.client = None
        else:
            self.client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url, timeout=timeout)
            logger.info(f"[LLM] Service initialized with {self.model}")

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Run one chat completion and return the first choice's content.

        Returns an empty string when the model produced no content.

        Raises:
            ServiceUnavailable: no API key configured
            LLMServiceError: the API call failed
        """
        if not self.client:
            raise ServiceUnavailable("llm", "GROQ_API_KEY not configured")

        kwargs = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                **kwargs
            )
        except Exception as e:
            logger.error(f"[LLM] Completion failed: {e}")
            raise LLMServiceError(f"Text completion failed: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self):
        if self.client:
            await self.client.close()
