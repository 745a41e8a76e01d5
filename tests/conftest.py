import json

import httpx
import pytest

from gpt_chat.config import AppSettings

COMPLETION_URL = "https://api.openai.com/v1/chat/completions"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_key="sk-test", completion_url=COMPLETION_URL)


@pytest.fixture
def completion_body() -> dict:
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0613",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "Hello there, how may I assist you today?"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
    }


class RecordingHandler:
    """MockTransport handler that remembers every request it saw."""

    def __init__(self, respond):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def mock_api():
    """Build an AsyncClient whose transport answers with ``respond(request)``."""
    def _make(respond):
        handler = RecordingHandler(respond)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, handler
    return _make

