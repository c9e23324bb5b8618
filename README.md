# fastsdk

Plain dataclass models for the request and response formats of
large-language-model provider APIs, an async WebSocket connection wrapper,
and a client for realtime WebSocket model sessions.

## What it covers

- **Common models** in `fastsdk.models.chat`: `ChatCompletionRequest`,
  `ChatCompletionResponse`, `ChatCompletionMessage`, `ChatCompletionChoice`
  and `Usage`. Each has `to_dict` and `from_dict`; `to_dict` leaves out
  optional fields that are empty, the way the wire format omits them.
  Timing fields (`conn_time`, `duration`, `total_time`) and `error` on a
  response are never serialised.
- **Media models** in `fastsdk.models.media`: speech (`SpeechRequest`,
  `SpeechResponse`), transcription (`AudioRequest`, `AudioResponse`),
  embeddings (`EmbeddingRequest`, `EmbeddingResponse`), images
  (`ImageRequest`, `ImageData`, `ImageResponse`), moderation
  (`ModerationRequest`, `ModerationResponse`) and realtime frames
  (`RealtimeRequest`, `RealtimeResponse`).
- **Provider wire formats**, one module each under `fastsdk.models`:
  - `xfyun`: Spark chat and image frames (`XfyunChatCompletionReq`,
    `XfyunChatCompletionRes`, with `Header`, `Chat`, `Payload`, `Choices`, `Text`).
  - `zhipuai`: `ZhipuAIChatCompletionReq`, `ZhipuAIChatCompletionRes`,
    `ZhipuAIChoice`, `ZhipuAIErrorBody`.
  - `anthropic`: `AnthropicChatCompletionReq`, `AnthropicChatCompletionRes`,
    `AnthropicContent`, `AnthropicTool`, `AnthropicUsage`, `AnthropicErrorBody`.
  - `midjourney`: `MidjourneyProxyRequest`, `MidjourneyProxyResponse`,
    `MidjourneyProxyFetchResponse`, `AccountFilter`, `MidjourneyFilter`,
    `Properties`, `Button` (camelCase keys on the wire).
  - `aliyun`: `AliyunChatCompletionReq`, `AliyunParameters`,
    `AliyunChatCompletionRes`, `AliyunOutput`.
  - `baidu`: `BaiduChatCompletionReq`, `BaiduChatCompletionRes`, `SearchResult`.
  - `google`: `GoogleChatCompletionReq`, `GoogleChatCompletionRes`, `Content`,
    `Part`, `GenerationConfig`, `Candidate`, `UsageMetadata`.
- **WebSocket wrapper** in `fastsdk.ws`: `websocket_client(ws_url,
  request_header, message_type, message, proxy_url)` opens a connection,
  optionally sending a first frame, and returns a `WebSocketConn` with
  `read_message`, `write_message`, `write_json` and `close`. Frame types are
  the `MessageType` enum; `read_message` returns `(MessageType.END, None)`
  once the connection has been closed locally.
- **Realtime client** in `fastsdk.realtime`: `RealtimeClient(model, key,
  base_url, path, proxy_url)` connects to `wss://api.openai.com/v1/realtime`
  by default (an `http(s)://` base URL is turned into `ws(s)://`), relays
  outgoing frames and yields incoming ones.

## Installation

```
pip install fastsdk
```

For running the test suite:

```
pip install "fastsdk[test]"
pytest
```

## Examples

Building a request body:

```python
from fastsdk.models.chat import ChatCompletionMessage, ChatCompletionRequest

request = ChatCompletionRequest(
    model="gpt-4o",
    messages=[ChatCompletionMessage(role="user", content="Hello")],
)
print(request.to_dict())
# {'model': 'gpt-4o', 'messages': [{'role': 'user', 'content': 'Hello'}]}
```

A realtime session:

```python
import asyncio

from fastsdk.models.media import RealtimeRequest
from fastsdk.realtime import RealtimeClient
from fastsdk.ws import MessageType


async def main():
    client = RealtimeClient("gpt-4o-realtime-preview", "placeholder")
    requests = asyncio.Queue()
    await requests.put(
        RealtimeRequest(message_type=MessageType.TEXT, message=b'{"type": "response.create"}')
    )

    async for response in await client.realtime(requests):
        if response.error is not None:
            print("ended with", response.error)
            break
        print(response.message)
        await requests.put(None)  # close the session


asyncio.run(main())
```

`realtime` accepts an `asyncio.Queue` or an async iterable of
`RealtimeRequest`. `None`, a request whose `message_type` is -1, or the end of
the iterable closes the connection and ends the responses. A read failure is
delivered as a final `RealtimeResponse` whose `error` is set.

## What it does not do

The package does not send chat, image, embedding, moderation or transcription
requests itself, and has no server-sent-event stream reader or provider
specific error types. The provider models describe the request and response
bodies; sending them over HTTP, signing them and mapping service errors is
left to the caller. The only network traffic the package makes is over
WebSocket, through `fastsdk.ws` and `fastsdk.realtime`.