import json
from dataclasses import dataclass, field
from typing import Any

from domain.conversation import ConversationInfo

SPEECH_EVENT_ID = "meeting"


@dataclass(frozen=True)
class MeetingInfo:
    id: str
    attendees: list[dict[str, str]] = field(default_factory=list)
    record: str = "false"
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        # Conversation properties first so the fixed keys win on conflict.
        meeting = dict(self.properties)
        meeting["id"] = self.id
        meeting["attendees"] = list(self.attendees)
        meeting["record"] = self.record
        return meeting


@dataclass(frozen=True)
class SpeechEventPayload:
    name: str
    meeting: MeetingInfo
    id: str = SPEECH_EVENT_ID

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "meeting": self.meeting.to_dict()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def create_speech_event_payload(info: ConversationInfo, command: str) -> SpeechEventPayload:
    return SpeechEventPayload(
        name=command,
        meeting=MeetingInfo(
            id=info.id,
            attendees=[p.to_dict() for p in info.participants],
            record="true" if info.audio_recording else "false",
            properties=info.properties,
        ),
    )
