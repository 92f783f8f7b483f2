import asyncio
import logging

from domain.conversation import ConversationInfo
from domain.notify import notify_safely
from domain.results import (
    CancellationErrorCode,
    CancellationReason,
    RecognitionResult,
    ResultReason,
    SpeechRecognitionEvent,
    TranscriptionCanceledEvent,
    cancellation_properties,
)
from domain.session import ErrorCallback, RequestSession, SuccessCallback
from domain.speech_context import SpeechContext
from domain.speech_event import SpeechEventPayload, create_speech_event_payload
from ports.audio import AudioSourcePort
from ports.connection import (
    ConnectionFactoryPort,
    ConnectionMessage,
    ConnectionPort,
    MessageType,
)
from ports.transcriber import TranscriberPort

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
WAVE_CONTENT_TYPE = "audio/x-wav"
SPEECH_CONTEXT_PATH = "speech.context"
SPEECH_EVENT_PATH = "speech.event"
AUDIO_PATH = "audio"


class TranscriptionServiceRecognizer:
    """Protocol adapter between a conversation transcriber and the service.

    The receive loop that parses inbound service messages lives elsewhere and
    calls ``on_recognizing``, ``on_recognized`` and ``cancel``; this class
    owns the handshake, outbound speech events and the single-shot delivery
    of terminal results.
    """

    def __init__(
        self,
        authentication: object,
        connection_factory: ConnectionFactoryPort,
        audio_source: AudioSourcePort,
        transcriber: TranscriberPort,
        word_level_timestamps: bool = False,
    ) -> None:
        self._authentication = authentication
        self._connection_factory = connection_factory
        self._audio_source = audio_source
        self._transcriber = transcriber
        self._connection: ConnectionPort | None = None
        self._request_session = RequestSession()
        self._speech_context = SpeechContext()
        if word_level_timestamps:
            self._speech_context.set_word_level_timings()

    @property
    def request_session(self) -> RequestSession:
        return self._request_session

    @property
    def speech_context(self) -> SpeechContext:
        return self._speech_context

    @property
    def is_recognizing(self) -> bool:
        return self._request_session.is_recognizing

    async def fetch_connection(self) -> ConnectionPort:
        if self._connection is None:
            self._connection = await self._connection_factory.create(
                self._authentication, self._request_session.session_id
            )
            logger.info("Connection %s established", self._request_session.session_id)
        return self._connection

    async def recognize(
        self,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._request_session.on_start_recognizing()
        self._request_session.callbacks.attach(on_success, on_error)
        try:
            connection = await self.fetch_connection()
            await self.start_session(connection)
        except (asyncio.CancelledError, Exception):
            logger.error("Session start failed for request %s", self._request_session.request_id)
            self._request_session.callbacks.clear()
            self._request_session.on_stop_recognizing()
            raise

    async def stop_recognizing(self) -> None:
        if self._request_session.is_recognizing:
            self._request_session.on_stop_recognizing()

    async def start_session(self, connection: ConnectionPort) -> None:
        await self.send_speech_context(connection, initial=True)
        info = self._transcriber.get_conversation_info()
        await self._send_speech_event_payload(connection, create_speech_event_payload(info, "start"))
        await self.send_wave_header(connection)
        logger.info("Session started (request=%s)", self._request_session.request_id)

    async def send_speech_context(self, connection: ConnectionPort, initial: bool = False) -> None:
        if initial:
            self._request_session.on_speech_context()
        await connection.send(
            ConnectionMessage(
                message_type=MessageType.TEXT,
                path=SPEECH_CONTEXT_PATH,
                request_id=self._request_session.request_id,
                content_type=JSON_CONTENT_TYPE,
                body=self._speech_context.to_json(),
            )
        )

    async def send_wave_header(self, connection: ConnectionPort) -> None:
        await connection.send(
            ConnectionMessage(
                message_type=MessageType.BINARY,
                path=AUDIO_PATH,
                request_id=self._request_session.request_id,
                content_type=WAVE_CONTENT_TYPE,
                body=self._audio_source.format_header(),
            )
        )

    async def send_speech_event(self, info: ConversationInfo, command: str) -> None:
        if not self._request_session.is_recognizing:
            logger.debug("Not recognizing, dropping speech event '%s'", command)
            return
        connection = await self.fetch_connection()
        await self._send_speech_event_payload(connection, create_speech_event_payload(info, command))

    async def _send_speech_event_payload(
        self, connection: ConnectionPort, payload: SpeechEventPayload
    ) -> None:
        speech_event_json = payload.to_json()
        if not speech_event_json:
            return
        logger.debug("Sending speech event '%s'", payload.name)
        await connection.send(
            ConnectionMessage(
                message_type=MessageType.TEXT,
                path=SPEECH_EVENT_PATH,
                request_id=self._request_session.request_id,
                content_type=JSON_CONTENT_TYPE,
                body=speech_event_json,
            )
        )

    def on_recognizing(self, result: RecognitionResult, duration: int, session_id: str) -> None:
        event = SpeechRecognitionEvent(result=result, offset=duration, session_id=session_id)
        notify_safely("recognizing", self._transcriber.recognizing, event)

    def on_recognized(self, result: RecognitionResult, offset: int, session_id: str) -> None:
        event = SpeechRecognitionEvent(result=result, offset=offset, session_id=session_id)
        logger.info("Recognized: %s", result.text)
        notify_safely("recognized", self._transcriber.recognized, event)

        on_success, on_error = self._request_session.callbacks.take()
        if on_success is None:
            return
        try:
            on_success(result)
        except Exception as e:
            if on_error is None:
                logger.warning("Success callback raised with no error callback attached", exc_info=True)
                return
            try:
                on_error(str(e))
            except Exception:
                logger.warning("Error callback raised", exc_info=True)

    def cancel(
        self,
        session_id: str,
        request_id: str,
        reason: CancellationReason,
        error_code: CancellationErrorCode,
        error_message: str,
    ) -> None:
        logger.info("Canceled: %s (%s) %s", reason.name, error_code.value, error_message)

        if self._transcriber.canceled is not None:
            event = TranscriptionCanceledEvent(
                reason=reason,
                error_details=error_message,
                error_code=error_code,
                session_id=session_id,
                properties=cancellation_properties(error_code),
            )
            notify_safely("canceled", self._transcriber.canceled, event)

        on_success, _ = self._request_session.callbacks.take()
        if on_success is None:
            return
        result = RecognitionResult(
            result_id=request_id,
            reason=ResultReason.CANCELED,
            error_details=error_message,
            properties=cancellation_properties(error_code),
        )
        try:
            on_success(result)
        except Exception:
            logger.warning("Success callback raised on cancellation", exc_info=True)

    def cancel_recognition_local(
        self,
        reason: CancellationReason,
        error_code: CancellationErrorCode,
        error: str,
    ) -> None:
        if self._request_session.is_recognizing:
            self._request_session.on_stop_recognizing()
        self.cancel(
            self._request_session.session_id,
            self._request_session.request_id,
            reason,
            error_code,
            error,
        )
