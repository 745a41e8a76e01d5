"""Abstract base class for LLM clients."""

from abc import ABC, abstractmethod
from typing import Sequence

from .types import ChatMessage, ChatResponse


class BaseLLMClient(ABC):
    """Abstract interface for chat-completion backends."""

    @abstractmethod
    async def complete(
        self,
        messages: Sequence[ChatMessage],
        model: str | None = None,
    ) -> ChatResponse:
        """Send a conversation and return the model's reply.

        Args:
            messages: The conversation so far, oldest first.
            model: Optional model override.

        Returns:
            The decoded completion.

        Raises:
            ChatError: One of its subclasses, depending on what went wrong.
        """
        ...

    async def close(self):
        pass
