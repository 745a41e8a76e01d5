"""Build chat messages out of a spoken conversation."""

from dataclasses import dataclass
from typing import Iterable

from .types import ChatMessage

SYSTEM_INSTRUCTION = (
    "You are a voice assistant named {name}. "
    "Answer with multiple small/medium sentences with the right punctuation. "
    "Only use dot (.) to end a sentence. "
    "Here is the current conversation, the name of the user is prefixed to each message. "
    "Answer the user question."
)


@dataclass
class Sentence:
    """One transcribed line of conversation."""
    name: str
    transcript: str


def format_transcript(history: Iterable[Sentence]) -> str:
    return "".join(f"{s.name}: {s.transcript}\n" for s in history)


def build_messages(
    history: Iterable[Sentence],
    prompt: str,
    assistant_name: str = "GPT",
) -> list[ChatMessage]:
    """Return the system instruction, the transcript so far and the user prompt."""
    return [
        ChatMessage(role="system", content=SYSTEM_INSTRUCTION.format(name=assistant_name)),
        ChatMessage(role="system", content=format_transcript(history)),
        ChatMessage(role="user", content=prompt),
    ]
