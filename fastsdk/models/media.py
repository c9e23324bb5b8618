"""Request and response types for speech, audio, embedding, image, moderation and realtime calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO

from fastsdk.models.chat import Usage, _compact


@dataclass
class SpeechRequest:
    """Text to be turned into speech."""

    model: str = ""
    input: str = ""
    voice: str = ""
    response_format: str = ""
    speed: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "model": self.model,
                "input": self.input,
                "voice": self.voice,
                "response_format": self.response_format,
                "speed": self.speed,
            },
            always=("model", "input", "voice"),
        )


@dataclass
class SpeechResponse:
    """Generated audio and the time the call took."""

    content: bytes = b""
    total_time: int = 0


@dataclass
class AudioRequest:
    """Audio to be transcribed, read from ``file_path`` or from ``reader``."""

    model: str = ""
    file_path: str = ""
    reader: BinaryIO | None = None
    prompt: str = ""
    temperature: float = 0.0
    language: str = ""
    response_format: str = ""
    timestamp_granularities: list[str] = field(default_factory=list)


@dataclass
class AudioResponse:
    """A transcription result."""

    task: str = ""
    language: str = ""
    duration: float = 0.0
    segments: list[dict] = field(default_factory=list)
    words: list[dict] = field(default_factory=list)
    text: str = ""
    total_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AudioResponse:
        return cls(
            task=data.get("task") or "",
            language=data.get("language") or "",
            duration=data.get("duration") or 0.0,
            segments=list(data.get("segments") or []),
            words=list(data.get("words") or []),
            text=data.get("text") or "",
        )


@dataclass
class EmbeddingRequest:
    """Input to be embedded."""

    input: Any = None
    model: str = ""
    user: str = ""
    encoding_format: str = ""
    dimensions: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "input": self.input,
                "model": self.model,
                "user": self.user,
                "encoding_format": self.encoding_format,
                "dimensions": self.dimensions,
            },
            always=("input", "model", "user"),
        )


@dataclass
class EmbeddingResponse:
    """Embedding vectors and their token usage."""

    object: str = ""
    data: list[dict] = field(default_factory=list)
    model: str = ""
    usage: Usage | None = None
    total_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmbeddingResponse:
        usage = data.get("usage")
        return cls(
            object=data.get("object") or "",
            data=list(data.get("data") or []),
            model=data.get("model") or "",
            usage=Usage.from_dict(usage) if usage is not None else None,
        )


@dataclass
class ImageRequest:
    """A prompt for image generation."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "prompt": self.prompt,
                "model": self.model,
                "n": self.n,
                "quality": self.quality,
                "size": self.size,
                "style": self.style,
                "response_format": self.response_format,
                "user": self.user,
            }
        )


@dataclass
class ImageData:
    """One generated image, as a URL or as base64 data."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""


def _image_data_to_dict(item: ImageData) -> dict[str, Any]:
    return _compact(
        {"url": item.url, "b64_json": item.b64_json, "revised_prompt": item.revised_prompt}
    )


def _image_data_from_dict(data: dict[str, Any]) -> ImageData:
    return ImageData(
        url=data.get("url") or "",
        b64_json=data.get("b64_json") or "",
        revised_prompt=data.get("revised_prompt") or "",
    )


@dataclass
class ImageResponse:
    """Generated images."""

    created: int = 0
    data: list[ImageData] = field(default_factory=list)
    total_time: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"created": self.created, "data": [_image_data_to_dict(d) for d in self.data]}
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageResponse:
        return cls(
            created=data.get("created") or 0,
            data=[_image_data_from_dict(d) for d in data.get("data") or []],
        )


@dataclass
class ModerationRequest:
    """Input to be checked by a moderation model."""

    model: str = ""
    input: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"model": self.model, "input": self.input}


@dataclass
class ModerationResponse:
    """Moderation results, or the error the service returned."""

    id: str = ""
    model: str = ""
    results: Any = None
    error: Any = None
    usage: Usage | None = None
    total_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ModerationResponse:
        return cls(
            id=data.get("id") or "",
            model=data.get("model") or "",
            results=data.get("results"),
            error=data.get("error"),
        )


@dataclass
class RealtimeRequest:
    """A frame to send on a realtime connection; a ``message_type`` of -1 closes it."""

    message_type: int = 0
    message: bytes | None = None


@dataclass
class RealtimeResponse:
    """A frame received on a realtime connection, or the error that ended it."""

    message_type: int = 0
    message: bytes | None = None
    usage: Usage | None = None
    conn_time: int = 0
    duration: int = 0
    total_time: int = 0
    error: BaseException | None = None