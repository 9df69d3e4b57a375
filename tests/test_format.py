import asyncio
import json

import httpx
import pytest

from ollama_api import InvalidFormat
from ollama_api.models.completion import resolve_format, resolve_tool

SCHEMA = {
    "type": "object",
    "properties": {"age": {"type": "integer"}, "available": {"type": "boolean"}},
    "required": ["age", "available"],
}

WEATHER_TOOL = {
    "type": "function",
    "function": {
        "name": "get_current_weather",
        "description": "Get the current weather for a location",
        "parameters": {
            "type": "object",
            "properties": {"location": {"type": "string"}},
            "required": ["location"],
        },
    },
}


def generate_reply(request):
    return httpx.Response(
        200, json={"model": "m", "created_at": "2024-08-01T00:00:00Z", "response": "{}", "done": True}
    )


@pytest.mark.parametrize("value", ["json", "JSON", "Json"])
def test_json_keyword_selects_json_mode(value):
    assert resolve_format(value) == "json"


def test_schema_string_is_embedded_as_object():
    assert resolve_format(json.dumps(SCHEMA)) == SCHEMA


def test_schema_dict_passes_through():
    assert resolve_format(SCHEMA) is SCHEMA


def test_invalid_schema_raises_with_parse_message():
    with pytest.raises(InvalidFormat) as excinfo:
        resolve_format("invalid format")
    assert "Expecting value" in str(excinfo.value)


def test_tool_string_is_parsed():
    assert resolve_tool(json.dumps(WEATHER_TOOL)) == WEATHER_TOOL


def test_tool_has_no_json_shortcut():
    with pytest.raises(InvalidFormat):
        resolve_tool("json")


def test_invalid_format_fails_at_send_not_at_build(mock_ollama):
    ollama, recorder = mock_ollama(generate_reply)

    action = ollama.generate("m", "p").format("invalid format")

    with pytest.raises(InvalidFormat):
        asyncio.run(action.send())
    assert recorder.requests == []


def test_schema_reaches_the_wire_as_json(mock_ollama):
    ollama, recorder = mock_ollama(generate_reply)

    asyncio.run(ollama.generate("m", "p").format(json.dumps(SCHEMA)).send())

    assert recorder.last_json()["format"] == SCHEMA


def test_json_shortcut_on_the_wire(mock_ollama):
    ollama, recorder = mock_ollama(generate_reply)

    asyncio.run(ollama.generate("m", "p").json().send())

    assert recorder.last_json()["format"] == "json"


def test_chat_tools_are_parsed_on_the_wire(mock_ollama):
    def reply(request):
        return httpx.Response(
            200,
            json={
                "model": "m",
                "created_at": "2024-08-01T00:00:00Z",
                "message": {
                    "role": "assistant",
                    "content": "",
                    "tool_calls": [{"function": {"name": "get_current_weather", "arguments": {"location": "Paris"}}}],
                },
                "done": True,
            },
        )

    ollama, recorder = mock_ollama(reply)

    resp = asyncio.run(ollama.chat("m").user_message("weather in Paris?").tool(json.dumps(WEATHER_TOOL)).send())

    assert recorder.last_json()["tools"] == [WEATHER_TOOL]
    assert resp.message.tool_calls[0]["function"]["name"] == "get_current_weather"
