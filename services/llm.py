import logging

import httpx

from config import ProviderConfig

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """A failure talking to the generation provider."""


class TransportError(GenerationError):
    """The provider could not be reached (network failure or timeout)."""


class ProviderError(GenerationError):
    """The provider answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"Gemini returned {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    """Pull the provider's error message out of the body, or fall back to the status."""
    fallback = f"provider returned status {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return fallback
    if not isinstance(data, dict):
        return fallback
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return fallback


class GeminiClient:
    """Sends prompts to Gemini generateContent over a shared, pooled httpx client."""

    def __init__(self, config: ProviderConfig, http_client: httpx.AsyncClient):
        self.config = config
        self.http_client = http_client

    async def send(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "X-goog-api-key": self.config.api_key,
        }
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        logger.debug("Calling Gemini (%d prompt chars)", len(prompt))
        try:
            r = await self.http_client.post(
                self.config.api_url,
                headers=headers,
                json=payload,
                timeout=self.config.timeout,
            )
        except httpx.RequestError as e:
            logger.warning("Gemini unreachable: %r", e)
            raise TransportError(f"Could not reach Gemini: {e!r}") from e

        if not r.is_success:
            message = _error_message(r)
            logger.warning("Gemini HTTP error: %s -> %s", r.status_code, message[:200])
            raise ProviderError(r.status_code, message)

        return r.text
