from fastsdk.models.anthropic import (
    AnthropicChatCompletionReq,
    AnthropicChatCompletionRes,
    AnthropicTool,
)
from fastsdk.models.chat import ChatCompletionMessage


def test_request_minimal_has_only_messages():
    req = AnthropicChatCompletionReq(messages=[ChatCompletionMessage(role="user", content="hi")])
    assert req.to_dict() == {"messages": [{"role": "user", "content": "hi"}]}


def test_request_with_tools_and_options():
    req = AnthropicChatCompletionReq(
        model="claude-3",
        max_tokens=1024,
        metadata={"user_id": "u1"},
        system="be brief",
        stream=True,
        tools=[AnthropicTool(name="f", description="d", input_schema={"type": "object"})],
        anthropic_version="bedrock-2023-05-31",
    )
    data = req.to_dict()
    assert data["model"] == "claude-3"
    assert data["max_tokens"] == 1024
    assert data["metadata"] == {"user_id": "u1"}
    assert data["system"] == "be brief"
    assert data["stream"] is True
    assert data["tools"] == [
        {"name": "f", "description": "d", "input_schema": {"type": "object"}}
    ]
    assert data["anthropic_version"] == "bedrock-2023-05-31"
    assert "top_k" not in data


def test_response_full_message():
    res = AnthropicChatCompletionRes.from_dict(
        {
            "id": "msg_1",
            "type": "message",
            "role": "assistant",
            "content": [{"type": "text", "text": "hello"}],
            "model": "claude-3",
            "stop_reason": "end_turn",
            "usage": {"input_tokens": 10, "output_tokens": 2},
        }
    )
    assert res.id == "msg_1"
    assert res.content[0].text == "hello"
    assert res.stop_reason == "end_turn"
    assert res.usage.input_tokens == 10
    assert res.usage.output_tokens == 2
    assert res.error is None


def test_response_stream_delta_event():
    res = AnthropicChatCompletionRes.from_dict(
        {
            "type": "content_block_delta",
            "index": 1,
            "delta": {"type": "input_json_delta", "partial_json": "{\"a\":"},
        }
    )
    assert res.index == 1
    assert res.delta.type == "input_json_delta"
    assert res.delta.partial_json == "{\"a\":"
    assert res.usage is None


def test_response_content_block_start():
    block = {"type": "tool_use", "id": "t1", "name": "f", "input": {}}
    res = AnthropicChatCompletionRes.from_dict(
        {"type": "content_block_start", "delta": {"content_block": block}}
    )
    assert res.delta.content_block == block


def test_response_error_event():
    res = AnthropicChatCompletionRes.from_dict(
        {"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}}
    )
    assert res.error.type == "overloaded_error"
    assert res.error.message == "Overloaded"
    assert res.error.code == 0