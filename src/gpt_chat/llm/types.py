"""Types for the chat-completions API."""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from .errors import ChatError, DecodeError


def _field(payload: dict, name: str, kind: type, where: str) -> Any:
    if not isinstance(payload, dict):
        raise DecodeError(f"{where}: expected an object, got {type(payload).__name__}")
    if name not in payload:
        raise DecodeError(f"{where}: missing field '{name}'")
    value = payload[name]
    # bool is a subclass of int, but never a valid timestamp or index
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DecodeError(f"{where}.{name}: expected {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ChatMessage:
    """A message in a chat conversation."""
    role: str  # "system", "user", or "assistant"
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_dict(cls, payload: dict, where: str = "message") -> "ChatMessage":
        return cls(
            role=_field(payload, "role", str, where),
            content=_field(payload, "content", str, where),
        )


@dataclass(frozen=True)
class ChatRequest:
    """Body of a POST to the chat-completions endpoint."""
    model: str
    messages: tuple[ChatMessage, ...]
    stream: bool = False

    def __post_init__(self):
        # Accept any sequence but keep the request immutable
        object.__setattr__(self, "messages", tuple(self.messages))

    def to_dict(self) -> dict:
        body = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        if self.stream:
            body["stream"] = True
        return body

    @classmethod
    def from_dict(cls, payload: dict) -> "ChatRequest":
        messages = _field(payload, "messages", list, "request")
        return cls(
            model=_field(payload, "model", str, "request"),
            messages=tuple(
                ChatMessage.from_dict(m, f"request.messages[{i}]") for i, m in enumerate(messages)
            ),
            stream=bool(payload.get("stream", False)),
        )


@dataclass
class ChatChoice:
    """One candidate reply in a completion."""
    index: int
    message: ChatMessage
    finish_reason: str

    @classmethod
    def from_dict(cls, payload: dict, where: str = "choice") -> "ChatChoice":
        return cls(
            index=_field(payload, "index", int, where),
            message=ChatMessage.from_dict(_field(payload, "message", dict, where), f"{where}.message"),
            finish_reason=_field(payload, "finish_reason", str, where),
        )


@dataclass
class ChatResponse:
    """A decoded chat completion."""
    id: str
    object: str
    created: int  # unix timestamp
    choices: list[ChatChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "ChatResponse":
        """Decode a completion body, raising DecodeError on any shape mismatch."""
        choices = _field(payload, "choices", list, "response")
        return cls(
            id=_field(payload, "id", str, "response"),
            object=_field(payload, "object", str, "response"),
            created=_field(payload, "created", int, "response"),
            choices=[
                ChatChoice.from_dict(c, f"response.choices[{i}]") for i, c in enumerate(choices)
            ],
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ChatResult:
    """Outcome of a chat request: either a response or the error that stopped it."""
    response: Optional[ChatResponse] = None
    error: Optional[ChatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ChatResponse:
        if self.error is not None:
            raise self.error
        return self.response
