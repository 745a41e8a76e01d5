"""Application configuration."""

import logging
import math
import os
from dataclasses import dataclass

import dotenv

from .llm.errors import ConfigError

dotenv.load_dotenv()


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class AppSettings:
    """Chat client settings with environment variable overrides."""

    # OpenAI
    api_key: str = ""
    completion_url: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-3.5-turbo"
    timeout: float = 30.0

    # Request
    prompt: str = "Hello"
    stream: bool = False

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "AppSettings":
        raw_timeout = os.getenv("GPT_TIMEOUT", str(cls.timeout))
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"GPT_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from e
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"GPT_TIMEOUT must be a positive number of seconds, got {raw_timeout!r}")

        log_level = os.getenv("LOG_LEVEL", cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            api_key=os.getenv("GPT_API_KEY", cls.api_key),
            completion_url=os.getenv("GPT_COMPLETION_URL", cls.completion_url),
            model=os.getenv("GPT_MODEL", cls.model),
            timeout=timeout,
            prompt=os.getenv("GPT_PROMPT", cls.prompt),
            stream=os.getenv("GPT_STREAM", "").strip().lower() in _TRUTHY,
            log_level=log_level,
        )
