from fastsdk.models.midjourney import (
    AccountFilter,
    Button,
    MidjourneyFilter,
    MidjourneyProxyFetchResponse,
    MidjourneyProxyRequest,
    MidjourneyProxyResponse,
    Properties,
)


def test_request_uses_camel_case_and_omits_empty():
    req = MidjourneyProxyRequest(
        prompt="a cat",
        base64_array=["aGVsbG8="],
        task_id="t1",
        notify_hook="https://hook.example.com",
        bot_type="MID_JOURNEY",
    )
    assert req.to_dict() == {
        "prompt": "a cat",
        "base64Array": ["aGVsbG8="],
        "taskId": "t1",
        "notifyHook": "https://hook.example.com",
        "botType": "MID_JOURNEY",
    }


def test_request_nested_filters():
    req = MidjourneyProxyRequest(
        account_filter=AccountFilter(channel_id="c1", remix_auto_considered=True),
        filter=MidjourneyFilter(instance_id="i1"),
    )
    data = req.to_dict()
    assert data["accountFilter"] == {"channelId": "c1", "remixAutoConsidered": True}
    assert data["filter"] == {"instanceId": "i1"}


def test_empty_nested_filter_is_kept_as_empty_object():
    data = MidjourneyProxyRequest(account_filter=AccountFilter()).to_dict()
    assert data == {"accountFilter": {}}


def test_proxy_response_from_dict():
    res = MidjourneyProxyResponse.from_dict(
        {
            "code": 1,
            "description": "Submit success",
            "result": "1712205491372",
            "properties": {"discordInstanceId": "d1", "bannedWord": "x"},
        }
    )
    assert res.code == 1
    assert res.result == "1712205491372"
    assert res.properties.discord_instance_id == "d1"
    assert res.properties.banned_word == "x"
    assert res.total_time == 0


def test_fetch_response_from_dict():
    res = MidjourneyProxyFetchResponse.from_dict(
        {
            "id": "t1",
            "action": "IMAGINE",
            "buttons": [{"customId": "MJ::JOB::upsample::1", "label": "U1", "style": 2, "type": 2}],
            "imageUrl": "https://cdn.example.com/a.png",
            "progress": "100%",
            "promptEn": "a cat",
            "submitTime": 10,
            "finishTime": 20,
            "status": "SUCCESS",
            "failReason": "",
        }
    )
    assert res.id == "t1"
    assert res.buttons == [Button(custom_id="MJ::JOB::upsample::1", label="U1", style=2, type=2)]
    assert res.image_url == "https://cdn.example.com/a.png"
    assert res.prompt_en == "a cat"
    assert res.submit_time == 10
    assert res.finish_time == 20
    assert res.properties is None


def test_properties_round_trip():
    props = Properties(notify_hook="h", final_prompt="p", flags=64, progress_message_id="m")
    assert Properties.from_dict(props.to_dict()) == props
    assert props.to_dict()["progressMessageId"] == "m"


def test_account_filter_round_trip():
    account_filter = AccountFilter(channel_id="c", modes=["FAST"], remix=True)
    assert AccountFilter.from_dict(account_filter.to_dict()) == account_filter