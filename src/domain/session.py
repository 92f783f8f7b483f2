import logging
import uuid
from collections.abc import Callable

from domain.results import RecognitionResult
from domain.state import RecognitionState, validate_transition

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[RecognitionResult], None]
ErrorCallback = Callable[[str], None]


def create_request_id() -> str:
    return uuid.uuid4().hex


class CompletionCallbacks:
    """Single-shot success/error callback pair for one recognition request.

    ``take()`` hands out whatever is attached and clears both slots in the
    same step, so only the first terminal event can ever see a live callback.
    """

    def __init__(self) -> None:
        self._success: SuccessCallback | None = None
        self._error: ErrorCallback | None = None

    @property
    def attached(self) -> bool:
        return self._success is not None or self._error is not None

    def attach(
        self,
        success: SuccessCallback | None = None,
        error: ErrorCallback | None = None,
    ) -> None:
        self._success = success
        self._error = error

    def take(self) -> tuple[SuccessCallback | None, ErrorCallback | None]:
        success, error = self._success, self._error
        self._success = None
        self._error = None
        return success, error

    def clear(self) -> None:
        self.take()


class RequestSession:
    def __init__(self, session_id: str | None = None) -> None:
        self._session_id = session_id or create_request_id()
        self._request_id = create_request_id()
        self._state = RecognitionState.IDLE
        self.callbacks = CompletionCallbacks()

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def state(self) -> RecognitionState:
        return self._state

    @property
    def is_recognizing(self) -> bool:
        return self._state is RecognitionState.RECOGNIZING

    def on_speech_context(self) -> None:
        self._request_id = create_request_id()
        logger.debug("New request id %s", self._request_id)

    def on_start_recognizing(self) -> None:
        self._transition_to(RecognitionState.RECOGNIZING)

    def on_stop_recognizing(self) -> None:
        self._transition_to(RecognitionState.IDLE)

    def _transition_to(self, target: RecognitionState) -> None:
        validate_transition(self._state, target)
        logger.info("State: %s -> %s", self._state.name, target.name)
        self._state = target
