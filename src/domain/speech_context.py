import json
from typing import Any


class SpeechContext:
    """Body of the ``speech.context`` message sent ahead of each turn."""

    def __init__(self) -> None:
        self._context: dict[str, Any] = {}

    @property
    def word_level_timings(self) -> bool:
        options = self._context.get("phraseOutput", {}).get("detailed", {}).get("options", [])
        return "WordTimings" in options

    def set_section(self, name: str, value: Any) -> None:
        self._context[name] = value

    def set_word_level_timings(self) -> None:
        phrase_output = self._context.setdefault("phraseOutput", {})
        phrase_output["format"] = "Detailed"
        detailed = phrase_output.setdefault("detailed", {})
        options = detailed.setdefault("options", [])
        if "WordTimings" not in options:
            options.append("WordTimings")

    def to_dict(self) -> dict[str, Any]:
        return json.loads(json.dumps(self._context))

    def to_json(self) -> str:
        return json.dumps(self._context, separators=(",", ":"), ensure_ascii=False)
