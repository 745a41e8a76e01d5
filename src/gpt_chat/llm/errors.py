"""Errors raised by the chat client."""


class ChatError(Exception):
    """Base class for every failure of a chat completion request."""


class ConfigError(ChatError):
    """A required setting, such as the API key, is missing or invalid."""


class NetworkError(ChatError):
    """The request could not be sent, or timed out before a response arrived."""


class APIError(NetworkError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class DecodeError(ChatError):
    """The response body is not JSON, or not shaped like a chat completion."""
