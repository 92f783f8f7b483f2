import asyncio

import pytest

from adapters.recording_connection import RecordingConnection, RecordingConnectionFactory
from adapters.wave_audio_source import WaveFormatAudioSource
from domain.conversation import ConversationInfo, Participant
from domain.recognizer import TranscriptionServiceRecognizer
from domain.results import RecognitionResult, ResultReason
from domain.transcriber import ConversationTranscriber
from ports.connection import ConnectionMessage


class FailingConnection:
    def __init__(self, fail_on_path: str) -> None:
        self._fail_on_path = fail_on_path
        self.messages: list[ConnectionMessage] = []

    async def send(self, message: ConnectionMessage) -> None:
        if message.path == self._fail_on_path:
            raise ConnectionError(f"send failed for {message.path}")
        self.messages.append(message)


class GatedConnection:
    """Holds every send open until the test releases it."""

    def __init__(self) -> None:
        self.messages: list[ConnectionMessage] = []
        self.pending = 0
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    async def send(self, message: ConnectionMessage) -> None:
        self.pending += 1
        await self._gate.wait()
        self.pending -= 1
        self.messages.append(message)


class FixedConnectionFactory:
    def __init__(self, connection) -> None:
        self._connection = connection
        self.create_count = 0

    async def create(self, authentication: object, connection_id: str):
        self.create_count += 1
        return self._connection


class CallbackRecorder:
    def __init__(self, raise_on_success: Exception | None = None) -> None:
        self.results: list[RecognitionResult] = []
        self.errors: list[str] = []
        self._raise_on_success = raise_on_success

    def on_success(self, result: RecognitionResult) -> None:
        self.results.append(result)
        if self._raise_on_success is not None:
            raise self._raise_on_success

    def on_error(self, error: str) -> None:
        self.errors.append(error)


def raising_handler(event) -> None:
    raise RuntimeError("handler blew up")


def make_result(text: str = "hello world", reason: ResultReason = ResultReason.RECOGNIZED_SPEECH) -> RecognitionResult:
    return RecognitionResult(result_id="r1", reason=reason, text=text, duration=1000, offset=0)


def make_recognizer(
    transcriber: ConversationTranscriber,
    connection_factory=None,
    word_level_timestamps: bool = False,
) -> TranscriptionServiceRecognizer:
    return TranscriptionServiceRecognizer(
        authentication=None,
        connection_factory=connection_factory or RecordingConnectionFactory(),
        audio_source=WaveFormatAudioSource(),
        transcriber=transcriber,
        word_level_timestamps=word_level_timestamps,
    )


@pytest.fixture
def conversation_info():
    return ConversationInfo(
        id="conv-1",
        participants=[
            Participant(id="alice", preferred_language="en-US", voice=""),
            Participant(id="bob", preferred_language="de-DE", voice="de-DE-KatjaNeural"),
        ],
        properties={"audiorecording": "on", "topic": "planning"},
    )


@pytest.fixture
def transcriber(conversation_info):
    return ConversationTranscriber(conversation_info)


@pytest.fixture
def connection_factory():
    return RecordingConnectionFactory()


@pytest.fixture
def recording_connection():
    return RecordingConnection(connection_id="c1")


@pytest.fixture
def recognizer(transcriber, connection_factory):
    return make_recognizer(transcriber, connection_factory)


@pytest.fixture
def callbacks():
    return CallbackRecorder()
