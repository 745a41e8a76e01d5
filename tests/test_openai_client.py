import httpx
import pytest

from gpt_chat.llm import ChatMessage, ConfigError, OpenAIChatClient, Sentence, build_messages


@pytest.mark.parametrize("api_key", ["", "   ", None])
def test_client_requires_api_key(api_key):
    with pytest.raises(ConfigError):
        OpenAIChatClient(api_key=api_key)


@pytest.mark.asyncio
async def test_complete_with_model_override(mock_api, completion_body):
    client, handler = mock_api(lambda request: httpx.Response(200, json=completion_body))

    async with client:
        chat = OpenAIChatClient(
            api_key="sk-test",
            completion_url="http://localhost:9999/v1/chat/completions",
            client=client,
        )
        response = await chat.complete([ChatMessage(role="user", content="Hi")], model="gpt-4o-mini")

    assert response.id == "chatcmpl-123"
    assert str(handler.requests[0].url) == "http://localhost:9999/v1/chat/completions"
    assert handler.last_body["model"] == "gpt-4o-mini"


@pytest.mark.asyncio
async def test_close_leaves_borrowed_client_open(mock_api, completion_body):
    client, _ = mock_api(lambda request: httpx.Response(200, json=completion_body))

    async with OpenAIChatClient(api_key="sk-test", client=client) as chat:
        await chat.complete([ChatMessage(role="user", content="Hi")])

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_close_releases_own_client():
    chat = OpenAIChatClient(api_key="sk-test")
    http_client = await chat._get_client()

    await chat.close()

    assert http_client.is_closed


def test_build_messages_from_history():
    history = [
        Sentence(name="Alice", transcript="What's the weather like?"),
        Sentence(name="Bob", transcript="No idea."),
    ]

    messages = build_messages(history, "Can GPT tell us?")

    assert [m.role for m in messages] == ["system", "system", "user"]
    assert "voice assistant named GPT" in messages[0].content
    assert messages[1].content == "Alice: What's the weather like?\nBob: No idea.\n"
    assert messages[2] == ChatMessage(role="user", content="Can GPT tell us?")


def test_build_messages_with_empty_history_and_custom_name():
    messages = build_messages([], "Hi", assistant_name="Kit")

    assert "named Kit" in messages[0].content
    assert messages[1].content == ""
