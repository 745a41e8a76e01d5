"""Minimal OpenAI chat-completions client."""

from .chat import request_chat, stream_chat
from .config import AppSettings

__all__ = ["AppSettings", "request_chat", "stream_chat"]
