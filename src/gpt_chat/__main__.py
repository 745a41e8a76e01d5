"""Entry point for `python -m gpt_chat`."""

import asyncio
import json
import logging
import sys

import httpx

from .chat import request_chat, stream_chat
from .config import AppSettings
from .llm import ChatError, ConfigError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def _exit_code(error: ChatError) -> int:
    return EXIT_CONFIG if isinstance(error, ConfigError) else EXIT_FAILURE


async def _run_once(settings: AppSettings) -> int:
    async with httpx.AsyncClient() as client:
        result = await request_chat(client, settings)

    if not result.ok:
        print(f"{type(result.error).__name__}: {result.error}", file=sys.stderr)
        return _exit_code(result.error)

    print(json.dumps(result.response.to_dict(), indent=2, ensure_ascii=False))
    return EXIT_OK


async def _run_stream(settings: AppSettings) -> int:
    async with httpx.AsyncClient() as client:
        try:
            async with await stream_chat(client, settings) as stream:
                async for sentence in stream:
                    print(sentence.strip(), flush=True)
        except ChatError as e:
            print(f"{type(e).__name__}: {e}", file=sys.stderr)
            return _exit_code(e)
    return EXIT_OK


def main() -> int:
    try:
        settings = AppSettings.from_env()
    except ConfigError as e:
        print(f"ConfigError: {e}", file=sys.stderr)
        return EXIT_CONFIG

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(message)s", datefmt="%H:%M:%S")

    runner = _run_stream if settings.stream else _run_once
    return asyncio.run(runner(settings))


if __name__ == "__main__":
    sys.exit(main())
