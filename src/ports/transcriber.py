from collections.abc import Callable
from typing import Protocol

from domain.conversation import ConversationInfo
from domain.results import SpeechRecognitionEvent, TranscriptionCanceledEvent

RecognitionHandler = Callable[[SpeechRecognitionEvent], None]
CanceledHandler = Callable[[TranscriptionCanceledEvent], None]


class TranscriberPort(Protocol):
    recognizing: RecognitionHandler | None
    recognized: RecognitionHandler | None
    canceled: CanceledHandler | None

    def get_conversation_info(self) -> ConversationInfo: ...
