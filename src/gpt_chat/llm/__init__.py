"""Chat-completions client layer."""

from .base import BaseLLMClient
from .errors import APIError, ChatError, ConfigError, DecodeError, NetworkError
from .openai import OpenAIChatClient
from .prompt import Sentence, build_messages
from .stream import ChatStream
from .types import ChatChoice, ChatMessage, ChatRequest, ChatResponse, ChatResult

__all__ = [
    "BaseLLMClient",
    "OpenAIChatClient",
    "ChatStream",
    "Sentence",
    "build_messages",
    "ChatMessage",
    "ChatRequest",
    "ChatChoice",
    "ChatResponse",
    "ChatResult",
    "ChatError",
    "ConfigError",
    "NetworkError",
    "APIError",
    "DecodeError",
]
