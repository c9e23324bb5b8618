from fastsdk.models.google import (
    Content,
    GenerationConfig,
    GoogleChatCompletionReq,
    GoogleChatCompletionRes,
    Part,
)


def test_text_part_omits_unset_data():
    assert Part(text="hi").to_dict() == {"text": "hi"}


def test_inline_data_part():
    part = Part(inline_data={"mime_type": "image/png", "data": "AAAA"})
    assert part.to_dict() == {"inline_data": {"mime_type": "image/png", "data": "AAAA"}}


def test_content_round_trip():
    content = Content(
        role="user",
        parts=[
            Part(text="describe"),
            Part(file_data={"file_uri": "gs://bucket/file", "mime_type": "image/jpeg"}),
        ],
    )
    assert Content.from_dict(content.to_dict()) == content


def test_request_uses_camel_case_config():
    req = GoogleChatCompletionReq(
        contents=[Content(role="user", parts=[Part(text="hi")])],
        generation_config=GenerationConfig(max_output_tokens=256, top_k=3, stop_sequences=["x"]),
    )
    data = req.to_dict()
    assert data["contents"] == [{"role": "user", "parts": [{"text": "hi"}]}]
    assert data["generationConfig"] == {"stopSequences": ["x"], "maxOutputTokens": 256, "topK": 3}


def test_empty_config_is_an_empty_object():
    assert GoogleChatCompletionReq().to_dict()["generationConfig"] == {}


def test_response_parses_candidates_and_usage():
    res = GoogleChatCompletionRes.from_dict(
        {
            "candidates": [
                {
                    "content": {"role": "model", "parts": [{"text": "hello"}]},
                    "finishReason": "STOP",
                    "index": 0,
                    "safetyRatings": [{"category": "HARM", "probability": "NEGLIGIBLE"}],
                }
            ],
            "usageMetadata": {
                "promptTokenCount": 2,
                "candidatesTokenCount": 3,
                "totalTokenCount": 5,
            },
        }
    )
    candidate = res.candidates[0]
    assert candidate.content.parts[0].text == "hello"
    assert candidate.finish_reason == "STOP"
    assert candidate.safety_ratings[0]["probability"] == "NEGLIGIBLE"
    assert res.usage_metadata.total_token_count == 5
    assert res.error_code == 0


def test_response_error():
    res = GoogleChatCompletionRes.from_dict(
        {"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}}
    )
    assert res.error_code == 400
    assert res.error_message == "API key not valid"
    assert res.error["status"] == "INVALID_ARGUMENT"
    assert res.candidates == []
    assert res.usage_metadata is None