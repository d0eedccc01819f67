"""HTTP client for the Gemini generateContent endpoint.

One POST per user question, no retries. Callers that need a reply no
matter what use send(), which turns every failure into a fixed fallback
message so the conversation can always continue.
"""

import logging

import httpx
from pydantic import ValidationError

from quibly.completion.config import CompletionConfig, get_completion_config
from quibly.models.gemini import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)

NO_ANSWER_FALLBACK = "Sorry, I couldn't understand that."
ERROR_FALLBACK = "Something went wrong. Please try again later."


class UpstreamRequestFailed(Exception):
    """Raised when the completion request fails or returns an unusable body."""


class CompletionClient:
    """Client for the completion API.

    Args:
        config: Optional client configuration.
                Loads from environment if not provided.
        transport: Optional httpx transport, used by tests to stub the API.
    """

    def __init__(
        self,
        config: CompletionConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_completion_config()
        self._transport = transport

    async def generate(self, request: GenerateContentRequest) -> GenerateContentResponse:
        """Send one generateContent request.

        Args:
            request: The formatted conversation.

        Returns:
            The validated response body.

        Raises:
            UpstreamRequestFailed: On network errors, non-success status,
                or a body that is not the expected JSON shape.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=request.model_dump(exclude_none=True),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamRequestFailed(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            # str(e) may embed the request URL, which carries the key
            raise UpstreamRequestFailed(f"Connection failed: {type(e).__name__}") from e

        try:
            return GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise UpstreamRequestFailed(f"Malformed response: {e.error_count()} error(s)") from e

    async def send(self, request: GenerateContentRequest) -> str:
        """Return the assistant reply text for a request.

        Never raises: a response without a usable candidate yields
        NO_ANSWER_FALLBACK, any failure yields ERROR_FALLBACK.
        """
        try:
            response = await self.generate(request)
        except UpstreamRequestFailed as e:
            logger.warning(f"Completion request failed: {e}")
            return ERROR_FALLBACK
        except Exception:
            logger.exception("Unexpected error during completion request")
            return ERROR_FALLBACK

        text = response.first_text()
        if text is None:
            logger.info("Completion response had no usable candidate")
            return NO_ANSWER_FALLBACK
        return text


# Module-level singleton instance
_completion_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """Get or create the global completion client.

    Returns:
        The CompletionClient instance.
    """
    global _completion_client
    if _completion_client is None:
        _completion_client = CompletionClient()
    return _completion_client
