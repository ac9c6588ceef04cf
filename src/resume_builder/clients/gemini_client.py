"""Gemini generateContent REST wrapper."""

from __future__ import annotations

import logging
import os

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from resume_builder.config import DEFAULT_BASE_URL, DEFAULT_MODEL

logger = logging.getLogger(__name__)


def build_request_body(prompt: str) -> dict:
    """Wrap a prompt in the generateContent contents/parts structure."""
    return {"contents": [{"parts": [{"text": prompt}]}]}


class GeminiClient:
    """Synchronous Gemini API client returning the raw response text."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float | None = 60,
        max_attempts: int = 1,
        http_client: httpx.Client | None = None,
    ):
        key = api_key or os.environ.get("GEMINI_API_KEY")
        if not key:
            raise ValueError(
                "Gemini API key required. Set GEMINI_API_KEY env var or pass api_key."
            )
        self.api_key = key
        self.model = model
        self.max_attempts = max_attempts
        self.client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    @property
    def endpoint(self) -> str:
        return f"/v1beta/models/{self.model}:generateContent"

    def _post(self, body: dict) -> httpx.Response:
        response = self.client.post(
            self.endpoint,
            params={"key": self.api_key},
            headers={"Content-Type": "application/json"},
            json=body,
        )
        response.raise_for_status()
        return response

    def generate(self, prompt: str) -> str:
        """Send a prompt to Gemini and return the raw JSON envelope text.

        Raises:
            httpx.HTTPStatusError: the API answered with a non-2xx status.
            httpx.TransportError: the request could not be completed.
        """
        logger.debug("Gemini call: model=%s", self.model)
        body = build_request_body(prompt)
        try:
            # Only transport failures are retried; an error status is final.
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(min=1, max=10),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = self._post(body)
        except httpx.HTTPStatusError as e:
            logger.error(
                "Error calling Gemini API: HTTP status %d, response body: %s",
                e.response.status_code,
                e.response.text,
            )
            raise
        except Exception:
            logger.error("Gemini call failed", exc_info=True)
            raise
        logger.debug("Gemini response: status=%d, %d chars", response.status_code, len(response.text))
        return response.text

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> GeminiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
