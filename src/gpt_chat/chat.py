"""One-shot chat requests driven by application settings."""

import logging

import httpx

from .config import AppSettings
from .llm import ChatError, ChatMessage, ChatResult, ChatStream, OpenAIChatClient

logger = logging.getLogger(__name__)


def _make_client(http_client: httpx.AsyncClient, settings: AppSettings) -> OpenAIChatClient:
    return OpenAIChatClient(
        api_key=settings.api_key,
        completion_url=settings.completion_url,
        model=settings.model,
        timeout=settings.timeout,
        client=http_client,
    )


def default_messages(settings: AppSettings) -> list[ChatMessage]:
    return [ChatMessage(role="user", content=settings.prompt)]


async def request_chat(
    http_client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> ChatResult:
    """Send the configured prompt as a single user message and decode the reply.

    Failures never escape: they come back as ``ChatResult.error`` so the caller
    decides whether to abort. A missing API key is reported before any request
    is made.
    """
    try:
        settings = settings or AppSettings.from_env()
        client = _make_client(http_client, settings)
        response = await client.complete(default_messages(settings))
    except ChatError as e:
        logger.debug("chat request failed: %s: %s", type(e).__name__, e)
        return ChatResult(error=e)

    logger.debug("chat completion %s returned %d choice(s)", response.id, len(response.choices))
    return ChatResult(response=response)


async def stream_chat(
    http_client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> ChatStream:
    """Open a streaming request for the configured prompt.

    Unlike request_chat this raises ChatError directly, since the caller has to
    consume the stream anyway.
    """
    settings = settings or AppSettings.from_env()
    client = _make_client(http_client, settings)
    return await client.stream(default_messages(settings))
