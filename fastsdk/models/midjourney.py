"""Wire types for a Midjourney proxy service."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from fastsdk.models.chat import _compact


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _flat_to_dict(obj: Any) -> dict[str, Any]:
    return _compact({_camel(f.name): getattr(obj, f.name) for f in fields(obj)})


def _flat_kwargs(cls: type, data: dict[str, Any], skip: tuple[str, ...] = ()) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name in skip:
            continue
        value = data.get(_camel(f.name))
        if value is not None:
            kwargs[f.name] = value
    return kwargs


@dataclass
class AccountFilter:
    """Restricts which account a task runs on."""

    channel_id: str = ""
    instance_id: str = ""
    modes: list[str] | None = None
    remark: str = ""
    remix: bool = False
    remix_auto_considered: bool = False

    def to_dict(self) -> dict[str, Any]:
        return _flat_to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AccountFilter:
        return cls(**_flat_kwargs(cls, data))


@dataclass
class MidjourneyFilter:
    """Restricts which instance a task runs on."""

    channel_id: str = ""
    instance_id: str = ""
    remark: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _flat_to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MidjourneyFilter:
        return cls(**_flat_kwargs(cls, data))


@dataclass
class Properties:
    """Extra details attached to a task."""

    notify_hook: str = ""
    final_prompt: str = ""
    message_id: str = ""
    message_hash: str = ""
    progress_message_id: str = ""
    flags: int = 0
    nonce: str = ""
    discord_instance_id: str = ""
    prompt_en: str = ""
    banned_word: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _flat_to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Properties:
        return cls(**_flat_kwargs(cls, data))


@dataclass
class Button:
    """An action button offered on a finished task."""

    custom_id: str = ""
    emoji: str = ""
    label: str = ""
    style: int = 0
    type: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _flat_to_dict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Button:
        return cls(**_flat_kwargs(cls, data))


@dataclass
class MidjourneyProxyRequest:
    """A task submission."""

    prompt: str = ""
    base64: str = ""
    base64_array: list[str] | None = None
    action: str = ""
    index: int = 0
    task_id: str = ""
    source_base64: str = ""
    target_base64: str = ""
    notify_hook: str = ""
    state: str = ""
    bot_type: str = ""
    dimensions: str = ""
    account_filter: AccountFilter | None = None
    mask_base64: str = ""
    filter: MidjourneyFilter | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {_camel(f.name): getattr(self, f.name) for f in fields(self)}
        data["accountFilter"] = (
            self.account_filter.to_dict() if self.account_filter is not None else None
        )
        data["filter"] = self.filter.to_dict() if self.filter is not None else None
        return _compact(data, nullable=("accountFilter", "filter"))


@dataclass
class MidjourneyProxyResponse:
    """The answer to a task submission."""

    code: int = 0
    description: str = ""
    result: str = ""
    properties: Properties | None = None
    total_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MidjourneyProxyResponse:
        kwargs = _flat_kwargs(cls, data, skip=("properties", "total_time"))
        properties = data.get("properties")
        if properties is not None:
            kwargs["properties"] = Properties.from_dict(properties)
        return cls(**kwargs)


@dataclass
class MidjourneyProxyFetchResponse:
    """The state of a submitted task."""

    id: str = ""
    action: str = ""
    buttons: list[Button] = field(default_factory=list)
    description: str = ""
    fail_reason: str = ""
    image_url: str = ""
    progress: str = ""
    prompt: str = ""
    prompt_en: str = ""
    properties: Properties | None = None
    submit_time: int = 0
    start_time: int = 0
    finish_time: int = 0
    state: str = ""
    status: str = ""
    total_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MidjourneyProxyFetchResponse:
        kwargs = _flat_kwargs(cls, data, skip=("buttons", "properties", "total_time"))
        kwargs["buttons"] = [Button.from_dict(b or {}) for b in data.get("buttons") or []]
        properties = data.get("properties")
        if properties is not None:
            kwargs["properties"] = Properties.from_dict(properties)
        return cls(**kwargs)