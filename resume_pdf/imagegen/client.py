"""HTTP client for the image generation API."""

from __future__ import annotations

import base64
import binascii
import logging
import time
from typing import Callable, Optional

import requests

from ..exceptions import ImageGenerationError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.openai.com/v1/images/generations"


class ImageClient:
    """Generates PNG images from prompts, retrying transient failures.

    A failed request is retried up to ``max_attempts`` attempts in total,
    waiting ``base_delay * 2 ** (attempt - 1)`` seconds after each failure.
    """

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 300.0,
        max_attempts: int = 3,
        base_delay: float = 0.8,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.base_delay = base_delay
        self.session = session or requests.Session()
        self._sleep = sleep

    def generate_png(self, prompt: str, *, model: str, size: str) -> bytes:
        """Generate one image.

        Args:
            prompt: Image prompt
            model: Model name (e.g. ``gpt-image-1``)
            size: Requested size as ``WxH``

        Returns:
            Decoded image bytes

        Raises:
            ImageGenerationError: If every attempt failed
        """
        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                return self._request(prompt, model=model, size=size)
            except (requests.RequestException, ImageGenerationError) as e:
                last_error = e
                if attempt == self.max_attempts:
                    break
                wait = self.base_delay * 2 ** (attempt - 1)
                logger.warning(f"  attempt {attempt} failed ({e}); retry in {wait:.1f}s")
                self._sleep(wait)

        raise ImageGenerationError(
            f"Image generation failed after {self.max_attempts} attempts", str(last_error)
        ) from last_error

    def _request(self, prompt: str, *, model: str, size: str) -> bytes:
        response = self.session.post(
            self.endpoint,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json={"model": model, "prompt": prompt, "size": size, "n": 1, "response_format": "b64_json"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise ImageGenerationError(f"HTTP {response.status_code}", response.text[:240])

        try:
            b64 = response.json()["data"][0]["b64_json"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ImageGenerationError("Response is missing b64_json") from e
        if not b64:
            raise ImageGenerationError("Response is missing b64_json")

        try:
            return base64.b64decode(b64)
        except (binascii.Error, ValueError) as e:
            raise ImageGenerationError("Response b64_json is not valid base64") from e
