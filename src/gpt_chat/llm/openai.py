"""OpenAI chat-completions client implementation."""

import logging
from typing import Sequence

import httpx

from .base import BaseLLMClient
from .errors import APIError, ConfigError, DecodeError, NetworkError
from .stream import ChatStream
from .types import ChatMessage, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

GPT_COMPLETION_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT = 30.0


def _error_message(response: httpx.Response) -> str:
    """Pull the provider's message out of an error body, falling back to the raw text."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return response.text.strip() or response.reason_phrase


class OpenAIChatClient(BaseLLMClient):
    """LLM client that talks to the OpenAI chat-completions endpoint."""

    def __init__(
        self,
        api_key: str,
        completion_url: str = GPT_COMPLETION_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigError("GPT_API_KEY is not set")
        self.api_key = api_key.strip()
        self.completion_url = completion_url
        self.model = model
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def build_request(
        self,
        messages: Sequence[ChatMessage],
        model: str | None = None,
        stream: bool = False,
    ) -> ChatRequest:
        return ChatRequest(model=model or self.model, messages=messages, stream=stream)

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        model: str | None = None,
    ) -> ChatResponse:
        chat_req = self.build_request(messages, model)
        client = await self._get_client()
        try:
            response = await client.post(
                self.completion_url,
                headers=self.headers,
                json=chat_req.to_dict(),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"request to {self.completion_url} timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise NetworkError(f"could not reach {self.completion_url}: {e}") from e
        except httpx.InvalidURL as e:
            raise ConfigError(f"GPT_COMPLETION_URL is not a valid URL: {e}") from e

        logger.debug("received response: %s %s", response.status_code, response.reason_phrase)

        if not response.is_success:
            raise APIError(response.status_code, _error_message(response))

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"response body is not valid JSON: {e}") from e
        return ChatResponse.from_dict(payload)

    async def stream(
        self,
        messages: Sequence[ChatMessage],
        model: str | None = None,
    ) -> ChatStream:
        """Open a streaming completion and return a reader of whole sentences."""
        chat_req = self.build_request(messages, model, stream=True)
        client = await self._get_client()
        try:
            request = client.build_request(
                "POST",
                self.completion_url,
                headers=self.headers,
                json=chat_req.to_dict(),
                timeout=self.timeout,
            )
            response = await client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise NetworkError(f"request to {self.completion_url} timed out after {self.timeout}s") from e
        except httpx.TransportError as e:
            raise NetworkError(f"could not reach {self.completion_url}: {e}") from e
        except httpx.InvalidURL as e:
            raise ConfigError(f"GPT_COMPLETION_URL is not a valid URL: {e}") from e

        logger.debug("opened stream: %s %s", response.status_code, response.reason_phrase)

        if not response.is_success:
            try:
                await response.aread()
            finally:
                await response.aclose()
            raise APIError(response.status_code, _error_message(response))

        return ChatStream(response)

    async def close(self):
        if self._client and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "OpenAIChatClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
