import asyncio

import pytest
from mcp.server import Server
from mcp.types import (
    CallToolRequest,
    CallToolRequestParams,
    ListToolsRequest,
    TextContent,
)

from pair_programmer.server import ToolInvocationError, build_server, call_tool_text, tool_definitions
from tests.conftest import DummyChatClient, FailingChatClient, make_dispatcher


def test_tool_definitions_expose_every_schema():
    dispatcher = make_dispatcher(DummyChatClient())
    tools = tool_definitions(dispatcher.tools)

    assert [tool.name for tool in tools] == [
        "pair",
        "review",
        "brainstorm",
        "review_performance",
        "review_security",
    ]
    review = tools[1]
    assert review.description == "Get comprehensive code review with actionable feedback"
    assert review.inputSchema["required"] == ["code"]
    assert review.inputSchema["properties"]["context"]["type"] == "string"


def test_call_tool_success_returns_text_content():
    dispatcher = make_dispatcher(DummyChatClient("Try a trie."))
    content = asyncio.run(call_tool_text(dispatcher, "brainstorm", {"topic": "autocomplete"}))

    assert content == [TextContent(type="text", text="Try a trie.")]


def test_call_tool_error_result_raises_handled_error():
    dispatcher = make_dispatcher(DummyChatClient())
    with pytest.raises(ToolInvocationError) as excinfo:
        asyncio.run(call_tool_text(dispatcher, "pair", {}))

    assert excinfo.value.code == "missing_argument"
    assert "prompt" in str(excinfo.value)


def test_call_tool_provider_error_keeps_message():
    dispatcher = make_dispatcher(FailingChatClient("invalid api key"))
    with pytest.raises(ToolInvocationError, match="OpenRouter API error: invalid api key"):
        asyncio.run(call_tool_text(dispatcher, "review", {"code": "x"}))


def test_build_server_identity():
    server = build_server(make_dispatcher(DummyChatClient()))

    assert isinstance(server, Server)
    assert server.name == "ai-pair-programmer"
    assert server.version == "1.0.0"


def _call(server, name, arguments):
    request = CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(server.request_handlers[CallToolRequest](request)).root


def test_registered_list_tools_handler():
    server = build_server(make_dispatcher(DummyChatClient()))
    result = asyncio.run(server.request_handlers[ListToolsRequest](ListToolsRequest(method="tools/list"))).root

    assert [tool.name for tool in result.tools][:2] == ["pair", "review"]


def test_registered_call_tool_handler_success():
    server = build_server(make_dispatcher(DummyChatClient("Ship it.")))
    result = _call(server, "pair", {"prompt": "hi"})

    assert result.isError is False
    assert result.content[0].text == "Ship it."


def test_registered_call_tool_handler_flags_errors():
    chat = DummyChatClient()
    server = build_server(make_dispatcher(chat))

    unknown = _call(server, "nope", {})
    assert unknown.isError is True
    assert unknown.content[0].text.startswith("Unknown tool 'nope'. Available tools: pair, review")

    missing = _call(server, "review", {"context": "no code"})
    assert missing.isError is True
    assert "Missing required argument 'code'" in missing.content[0].text
    assert chat.calls == []
