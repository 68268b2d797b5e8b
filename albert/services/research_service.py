"""
Research Service - web-search augmented completions (Perplexity).

Answers factual questions with live search results; also used for the first,
descriptive half of the event classification.
"""
import logging
from typing import Dict, List, Optional

import httpx

from .exceptions import ResearchServiceError, ServiceUnavailable

logger = logging.getLogger(__name__)


class ResearchService:
    """Perplexity chat completions client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        from albert.config import config
        self.api_key = api_key or config.ai.perplexity_api_key or ""
        self.model = model or config.ai.research_model
        self.url = url or config.ai.research_url
        self.client = client or httpx.AsyncClient(timeout=config.ai.http_timeout)

        if not self.api_key or self.api_key.startswith("PASTE_"):
            logger.warning("[RESEARCH] API key not configured - research disabled")
            self.api_key = ""
        else:
            logger.info(f"[RESEARCH] Service initialized with {self.model}")

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def ask(self, system_prompt: str, user_prompt: str) -> str:
        """
        Ask one question and return the answer text.

        Raises:
            ServiceUnavailable: no API key configured
            ResearchServiceError: HTTP failure or malformed response
        """
        if not self.api_key:
            raise ServiceUnavailable("research", "PERPLEXITY_API_KEY not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }

        try:
            response = await self.client.post(self.url, headers=self._get_headers(), json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"[RESEARCH] API error {e.response.status_code}: {e.response.text[:200]}")
            raise ResearchServiceError(
                f"Research request failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"[RESEARCH] Request failed: {e}")
            raise ResearchServiceError(f"Research request failed: {e}") from e
        except ValueError as e:
            logger.error(f"[RESEARCH] Non-JSON response: {response.text[:200]}")
            raise ResearchServiceError(
                "Unexpected research response: body is not JSON",
                status_code=response.status_code,
            ) from e

        try:
            return result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ResearchServiceError(f"Unexpected research response: {str(result)[:200]}") from e

    async def close(self):
        await self.client.aclose()
