from domain.conversation import ConversationInfo
from ports.transcriber import CanceledHandler, RecognitionHandler


class ConversationTranscriber:
    def __init__(self, conversation_info: ConversationInfo) -> None:
        self._conversation_info = conversation_info
        self.recognizing: RecognitionHandler | None = None
        self.recognized: RecognitionHandler | None = None
        self.canceled: CanceledHandler | None = None

    def get_conversation_info(self) -> ConversationInfo:
        return self._conversation_info

    def update_conversation_info(self, info: ConversationInfo) -> None:
        self._conversation_info = info
