"""Sentence-at-a-time reader over a streamed chat completion."""

import json
import logging

import httpx

from .errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

DATA_PREFIX = "data:"
DONE_MARKER = "[DONE]"


class ChatStream:
    """Wraps a server-sent-events completion stream and hands back complete sentences.

    A sentence ends with a delta whose trimmed text ends in ".". When the stream
    runs out, whatever text is left over is returned as a final sentence unless
    it is blank.
    """

    def __init__(self, response: httpx.Response):
        self._response = response
        self._lines = response.aiter_lines()
        self._done = False

    async def _next_delta(self) -> str | None:
        """Return the next content delta, or None once the stream is finished."""
        while not self._done:
            try:
                line = await self._lines.__anext__()
            except StopAsyncIteration:
                self._done = True
                break
            except httpx.TransportError as e:
                self._done = True
                raise NetworkError(f"stream interrupted: {e}") from e

            line = line.strip()
            if not line.startswith(DATA_PREFIX):
                continue
            data = line[len(DATA_PREFIX):].strip()
            if data == DONE_MARKER:
                self._done = True
                break

            try:
                chunk = json.loads(data)
            except json.JSONDecodeError as e:
                raise DecodeError(f"stream chunk is not valid JSON: {data[:100]!r}") from e
            try:
                delta = chunk["choices"][0].get("delta", {})
            except (KeyError, IndexError, TypeError, AttributeError) as e:
                raise DecodeError(f"unexpected stream chunk: {data[:100]!r}") from e
            content = delta.get("content") if isinstance(delta, dict) else None
            if content:
                return content
        return None

    async def read(self) -> str:
        """Return the next complete sentence, raising StopAsyncIteration when exhausted."""
        parts = []
        while True:
            delta = await self._next_delta()
            if delta is None:
                content = "".join(parts)
                if content.strip():
                    return content
                raise StopAsyncIteration

            parts.append(delta)
            if delta.strip().endswith("."):
                return "".join(parts)

    def __aiter__(self) -> "ChatStream":
        return self

    async def __anext__(self) -> str:
        return await self.read()

    async def close(self):
        await self._response.aclose()
        logger.debug("closed completion stream")

    async def __aenter__(self) -> "ChatStream":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
