from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CardPayload",
    "IntentPayload",
    "OutputSpeech",
    "RepromptPayload",
    "RequestPayload",
    "ResponseBody",
    "SessionPayload",
    "SkillRequest",
    "SkillResponse",
    "SlotPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SlotPayload(_APIModel):
    name: str
    value: str | None = None


class IntentPayload(_APIModel):
    name: str
    slots: dict[str, SlotPayload] = Field(default_factory=dict)

    def slot_value(self, slot: str) -> str | None:
        payload = self.slots.get(slot)
        return payload.value if payload is not None else None


class RequestPayload(_APIModel):
    type: str
    request_id: str = Field(default="", alias="requestId")
    timestamp: str | None = None
    locale: str | None = None
    intent: IntentPayload | None = None
    reason: str | None = None


class SessionPayload(_APIModel):
    new: bool = False
    session_id: str = Field(default="", alias="sessionId")
    attributes: dict[str, Any] = Field(default_factory=dict)


class SkillRequest(_APIModel):
    version: str = "1.0"
    session: SessionPayload = Field(default_factory=SessionPayload)
    request: RequestPayload


class OutputSpeech(_APIModel):
    type: Literal["PlainText"] = "PlainText"
    text: str


class CardPayload(_APIModel):
    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class RepromptPayload(_APIModel):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class ResponseBody(_APIModel):
    output_speech: OutputSpeech | None = Field(default=None, alias="outputSpeech")
    card: CardPayload | None = None
    reprompt: RepromptPayload | None = None
    should_end_session: bool = Field(default=True, alias="shouldEndSession")


class SkillResponse(_APIModel):
    version: str = "1.0"
    session_attributes: dict[str, Any] | None = Field(default=None, alias="sessionAttributes")
    response: ResponseBody
