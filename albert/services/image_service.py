"""
Image Service - Replicate predictions API for text-to-image inference.

API: https://api.replicate.com/v1
Model: black-forest-labs/flux-dev

Uses the prediction flow:
1. Create prediction (synchronous wait requested)
2. Poll the prediction URL until it reaches a terminal status
3. Return the raw ``output`` field (normally a list of image URLs)
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import ImageServiceError, ServiceUnavailable

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = ("succeeded", "failed", "canceled")


class ImageService:
    """Replicate image generation client."""

    def __init__(
        self,
        api_token: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        poll_interval: float = 2.0,
        max_wait: int = 180,
    ):
        from albert.config import config
        self.api_token = api_token or config.ai.replicate_api_token or ""
        self.model = model or config.ai.image_model
        self.base_url = base_url or config.ai.image_base_url
        self.client = client or httpx.AsyncClient(timeout=config.ai.http_timeout)
        self.poll_interval = poll_interval
        self.max_wait = max_wait

        if not self.api_token or self.api_token.startswith("PASTE_"):
            logger.warning("[IMAGES] No API token configured - image generation disabled")
            self.api_token = ""
        else:
            masked = self.api_token[:4] + "..." + self.api_token[-4:] if len(self.api_token) > 8 else "***"
            logger.info(f"[IMAGES] Initialized with {self.model} (token {masked})")

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    async def run(self, inputs: Dict[str, Any]) -> Any:
        """
        Run the model with the given inputs and return its output.

        Raises:
            ServiceUnavailable: no API token configured
            ImageServiceError: HTTP failure, malformed response, or the prediction
                failed, was canceled or timed out
        """
        if not self.api_token:
            raise ServiceUnavailable("images", "REPLICATE_API_TOKEN not configured")

        url = f"{self.base_url}/models/{self.model}/predictions"
        headers = {**self._get_headers(), "Prefer": "wait"}

        try:
            response = await self.client.post(url, headers=headers, json={"input": inputs})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[IMAGES] API error {e.response.status_code}: {e.response.text[:200]}")
            raise ImageServiceError(f"Image request failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ImageServiceError(f"Image request failed: {e}") from e

        prediction = self._decode(response)
        logger.info(f"[IMAGES] Prediction {prediction.get('id')}: {prediction.get('status')}")

        if prediction.get("status") not in TERMINAL_STATUSES:
            prediction = await self._poll_for_completion(prediction)

        return self._extract_output(prediction)

    async def _poll_for_completion(self, prediction: Dict[str, Any]) -> Dict[str, Any]:
        """Poll the prediction until it settles."""
        prediction_id = prediction.get("id")
        get_url = (prediction.get("urls") or {}).get("get")
        if not get_url:
            raise ImageServiceError("Prediction has no polling URL", prediction_id=prediction_id)

        attempts = max(1, int(self.max_wait / self.poll_interval))
        for i in range(attempts):
            await asyncio.sleep(self.poll_interval)

            try:
                response = await self.client.get(get_url, headers=self._get_headers())
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"[IMAGES] Poll error {e.response.status_code} for {prediction_id}")
                raise ImageServiceError(
                    f"Prediction polling failed with status {e.response.status_code}",
                    prediction_id=prediction_id,
                ) from e
            except httpx.HTTPError as e:
                raise ImageServiceError(f"Prediction polling failed: {e}", prediction_id=prediction_id) from e

            prediction = self._decode(response, prediction_id)

            status = prediction.get("status")
            if status in TERMINAL_STATUSES:
                return prediction

            logger.debug(f"[IMAGES] Polling {prediction_id}: {status} (attempt {i+1})")

        raise ImageServiceError(
            f"Prediction {prediction_id} timed out after {self.max_wait}s",
            prediction_id=prediction_id,
        )

    @staticmethod
    def _decode(response: httpx.Response, prediction_id: Optional[str] = None) -> Dict[str, Any]:
        try:
            prediction = response.json()
        except ValueError as e:
            logger.error(f"[IMAGES] Non-JSON response: {response.text[:200]}")
            raise ImageServiceError("Unexpected response from image service", prediction_id=prediction_id) from e
        if not isinstance(prediction, dict):
            raise ImageServiceError("Unexpected response from image service", prediction_id=prediction_id)
        return prediction

    @staticmethod
    def _extract_output(prediction: Dict[str, Any]) -> Any:
        status = prediction.get("status")
        if status == "succeeded":
            return prediction.get("output")

        error = prediction.get("error") or f"Prediction {status}"
        raise ImageServiceError(f"Image generation failed: {error}", prediction_id=prediction.get("id"))

    async def close(self):
        await self.client.aclose()
