from fastsdk.models.chat import ChatCompletionMessage
from fastsdk.models.zhipuai import (
    ZhipuAIChatCompletionReq,
    ZhipuAIChatCompletionRes,
    ZhipuAIChoice,
    ZhipuAIErrorBody,
)


def test_request_minimal_keeps_model_and_messages():
    req = ZhipuAIChatCompletionReq(
        model="glm-4", messages=[ChatCompletionMessage(role="user", content="hi")]
    )
    assert req.to_dict() == {
        "model": "glm-4",
        "messages": [{"role": "user", "content": "hi"}],
    }


def test_request_optional_fields():
    req = ZhipuAIChatCompletionReq(
        model="glm-4",
        stream=True,
        temperature=0.5,
        max_tokens=2,
        stop=["END"],
        tool_choice="auto",
        user_id="user-1",
    )
    data = req.to_dict()
    assert data["stream"] is True
    assert data["temperature"] == 0.5
    assert data["max_tokens"] == 2
    assert data["stop"] == ["END"]
    assert data["tool_choice"] == "auto"
    assert data["user_id"] == "user-1"
    assert "top_p" not in data
    assert "request_id" not in data


def test_response_from_dict_with_message():
    res = ZhipuAIChatCompletionRes.from_dict(
        {
            "id": "abc",
            "created": 1700000000,
            "model": "glm-4",
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": "hello"},
                }
            ],
            "usage": {"prompt_tokens": 3, "completion_tokens": 4, "total_tokens": 7},
        }
    )
    assert res.id == "abc"
    assert res.created == 1700000000
    assert res.choices[0].finish_reason == "stop"
    assert res.choices[0].message.content == "hello"
    assert res.usage.total_tokens == 7
    assert res.error.code == ""


def test_response_stream_delta():
    res = ZhipuAIChatCompletionRes.from_dict(
        {"id": "x", "choices": [{"index": 0, "delta": {"role": "assistant", "content": "he"}}]}
    )
    assert res.choices[0].delta == {"role": "assistant", "content": "he"}
    assert res.choices[0].message is None
    assert res.usage is None


def test_error_code_is_text():
    res = ZhipuAIChatCompletionRes.from_dict({"error": {"code": 1261, "message": "too long"}})
    assert res.error.code == "1261"
    assert res.error.message == "too long"


def test_response_round_trip():
    res = ZhipuAIChatCompletionRes(
        id="id1",
        created=5,
        model="glm-4",
        choices=[
            ZhipuAIChoice(
                index=1,
                finish_reason="length",
                message=ChatCompletionMessage(role="assistant", content="x"),
            )
        ],
        error=ZhipuAIErrorBody(code="1113", message="quota"),
    )
    assert ZhipuAIChatCompletionRes.from_dict(res.to_dict()) == res


def test_choice_to_dict_keeps_index_and_finish_reason():
    assert ZhipuAIChoice().to_dict() == {"index": 0, "finish_reason": ""}