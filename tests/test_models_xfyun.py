from fastsdk.models.chat import ChatCompletionMessage
from fastsdk.models.xfyun import (
    Chat,
    Choices,
    Header,
    Payload,
    Text,
    XfyunChatCompletionReq,
    XfyunChatCompletionRes,
)


def _sample_response():
    return {
        "header": {"code": 0, "message": "Success", "sid": "cht000", "status": 2},
        "payload": {
            "choices": {
                "status": 2,
                "seq": 3,
                "text": [{"content": "hello", "role": "assistant", "index": 0}],
            },
            "usage": {
                "text": {
                    "question_tokens": 4,
                    "prompt_tokens": 5,
                    "completion_tokens": 9,
                    "total_tokens": 14,
                }
            },
        },
    }


def test_request_to_dict_layout():
    req = XfyunChatCompletionReq(
        header=Header(app_id="app", uid="0123456789"),
        chat=Chat(domain="generalv3.5", max_tokens=4096),
        payload=Payload(message=[ChatCompletionMessage(role="user", content="hi")]),
    )
    data = req.to_dict()
    assert data["header"] == {"app_id": "app", "uid": "0123456789"}
    assert data["parameter"] == {"chat": {"domain": "generalv3.5", "max_tokens": 4096}}
    assert data["payload"] == {"message": {"text": [{"role": "user", "content": "hi"}]}}


def test_request_without_chat_has_null_chat():
    data = XfyunChatCompletionReq().to_dict()
    assert data["parameter"] == {"chat": None}
    assert data["payload"] == {}


def test_request_functions_are_wrapped_in_text():
    functions = [{"name": "lookup", "parameters": {}}]
    data = XfyunChatCompletionReq(payload=Payload(functions=functions)).to_dict()
    assert data["payload"]["functions"] == {"text": functions}


def test_chat_keeps_domain_when_empty():
    assert Chat().to_dict() == {"domain": ""}


def test_header_optional_fields_appear_when_set():
    data = Header(app_id="a", uid="u", code=10163, sid="s").to_dict()
    assert data["code"] == 10163
    assert data["sid"] == "s"
    assert "status" not in data


def test_response_from_dict():
    res = XfyunChatCompletionRes.from_dict(_sample_response())
    assert res.header.sid == "cht000"
    assert res.header.status == 2
    assert res.payload.choices.seq == 3
    assert res.payload.choices.text[0].content == "hello"
    assert res.payload.choices.text[0].role == "assistant"
    assert res.payload.usage.prompt_tokens == 5
    assert res.payload.usage.total_tokens == 14


def test_response_without_usage():
    data = _sample_response()
    del data["payload"]["usage"]
    res = XfyunChatCompletionRes.from_dict(data)
    assert res.payload.usage is None


def test_response_round_trip():
    res = XfyunChatCompletionRes.from_dict(_sample_response())
    assert XfyunChatCompletionRes.from_dict(res.to_dict()) == res


def test_error_response_keeps_code():
    res = XfyunChatCompletionRes.from_dict(
        {"header": {"code": 10907, "message": "too long", "sid": "x"}}
    )
    assert res.header.code == 10907
    assert res.payload.choices is None
    assert res.to_dict()["header"]["message"] == "too long"


def test_text_omits_empty_fields():
    assert Text(content="abc").to_dict() == {"content": "abc"}
    assert Choices().to_dict() == {}