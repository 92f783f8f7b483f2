from typing import Protocol


class AudioSourcePort(Protocol):
    def format_header(self) -> bytes: ...
