from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Participant:
    id: str
    preferred_language: str = ""
    voice: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "preferredLanguage": self.preferred_language,
            "voice": self.voice,
        }


@dataclass(frozen=True)
class ConversationInfo:
    id: str
    participants: list[Participant] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def audio_recording(self) -> bool:
        return self.properties.get("audiorecording") == "on"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversationInfo":
        if "id" not in data:
            raise ValueError("Conversation document is missing 'id'")
        participants = []
        for entry in data.get("participants", []):
            if "id" not in entry:
                raise ValueError("Participant entry is missing 'id'")
            participants.append(
                Participant(
                    id=entry["id"],
                    preferred_language=entry.get("preferredLanguage", ""),
                    voice=entry.get("voice", ""),
                )
            )
        properties = data.get("properties", {})
        if not isinstance(properties, dict):
            raise ValueError("Conversation 'properties' must be an object")
        return cls(id=data["id"], participants=participants, properties=dict(properties))
