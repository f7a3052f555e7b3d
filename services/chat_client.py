"""Minimal chat-completion client over httpx.

Speaks the OpenAI-compatible ``/chat/completions`` contract used by both
the meal-plan text model and the vision model:

request  ``{model, messages: [{role, content}], max_tokens, temperature, response_format}``
response ``{choices: [{message: {content}}]}``

One request per call: no retries, no backoff. Failures are raised as
`AIServiceError` (transport / non-2xx) or `AIResponseError` (empty or
malformed payload) so callers can route to their fallback.
"""

import re
from typing import Any, Dict, List, Optional

import httpx

from core import config
from core.exceptions import AIResponseError, AIServiceError
from core.logger import get_logger

logger = get_logger("services.chat_client")

_FENCE_OPEN = re.compile(r"```json\n?")
_FENCE_ANY = re.compile(r"```\n?")


def strip_code_fences(content: str) -> str:
    """Remove markdown code-fence wrapping from a model answer."""
    return _FENCE_ANY.sub("", _FENCE_OPEN.sub("", content)).strip()


class ChatCompletionClient:
    """Synchronous client for one chat-completion endpoint.

    Args:
        api_url: Full ``/chat/completions`` URL.
        api_key: Bearer token.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass `httpx.MockTransport`).
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = config.AI_REQUEST_TIMEOUT_S,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def complete(
        self,
        messages: List[Dict[str, Any]],
        model: str,
        max_tokens: int = 1000,
        temperature: Optional[float] = None,
        response_format: Optional[Dict[str, str]] = None,
    ) -> str:
        """Send one request and return the first choice's message content."""
        payload = {"model": model, "messages": messages, "max_tokens": max_tokens}
        if temperature is not None:
            payload["temperature"] = temperature
        if response_format is not None:
            payload["response_format"] = response_format

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.post(self.api_url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise AIServiceError(f"Request to {model} timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise AIServiceError(f"Request to {model} failed: {exc}") from exc

        if resp.status_code < 200 or resp.status_code >= 300:
            logger.error("Chat completion HTTP %s from %s: %s", resp.status_code, self.api_url, resp.text[:500])
            raise AIServiceError(f"{model} returned HTTP {resp.status_code}", upstream_status=resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise AIResponseError("Response body is not JSON", content=resp.text) from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AIResponseError("Unexpected chat completion shape", content=str(data)) from exc

        if not isinstance(content, str) or not content.strip():
            raise AIResponseError("Empty model response")
        return content.strip()
