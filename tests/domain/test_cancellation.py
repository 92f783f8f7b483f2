import pytest

from domain.results import (
    CANCELLATION_ERROR_CODE_PROPERTY,
    CancellationErrorCode,
    CancellationReason,
    ResultReason,
)

from conftest import CallbackRecorder, make_result, raising_handler


def attach(recognizer, recorder):
    recognizer.request_session.callbacks.attach(recorder.on_success, recorder.on_error)


def cancel_with_service_error(recognizer):
    recognizer.cancel(
        session_id="s1",
        request_id="r1",
        reason=CancellationReason.ERROR,
        error_code=CancellationErrorCode.SERVICE_ERROR,
        error_message="boom",
    )


class TestCancel:
    def test_delivers_canceled_result_through_success_callback(self, recognizer, callbacks):
        attach(recognizer, callbacks)

        cancel_with_service_error(recognizer)

        assert len(callbacks.results) == 1
        result = callbacks.results[0]
        assert result.result_id == "r1"
        assert result.reason is ResultReason.CANCELED
        assert result.error_details == "boom"
        assert result.properties == {CANCELLATION_ERROR_CODE_PROPERTY: "ServiceError"}
        assert callbacks.errors == []

    def test_canceled_result_has_no_content(self, recognizer, callbacks):
        attach(recognizer, callbacks)

        cancel_with_service_error(recognizer)

        result = callbacks.results[0]
        assert result.text is None
        assert result.duration is None
        assert result.offset is None
        assert result.language is None
        assert result.language_detection_confidence is None
        assert result.speaker_id is None
        assert result.json is None

    def test_notifies_canceled_observer(self, recognizer, transcriber):
        events = []
        transcriber.canceled = events.append

        cancel_with_service_error(recognizer)

        assert len(events) == 1
        event = events[0]
        assert event.reason is CancellationReason.ERROR
        assert event.error_code is CancellationErrorCode.SERVICE_ERROR
        assert event.error_details == "boom"
        assert event.session_id == "s1"
        assert event.properties[CANCELLATION_ERROR_CODE_PROPERTY] == "ServiceError"

    def test_both_branches_fire_observer_first(self, recognizer, transcriber):
        order = []
        transcriber.canceled = lambda event: order.append("observer")
        recognizer.request_session.callbacks.attach(lambda result: order.append("callback"))

        cancel_with_service_error(recognizer)

        assert order == ["observer", "callback"]

    def test_neither_branch_attached(self, recognizer):
        cancel_with_service_error(recognizer)

    def test_callback_invoked_once_across_repeated_cancels(self, recognizer, callbacks):
        attach(recognizer, callbacks)

        cancel_with_service_error(recognizer)
        cancel_with_service_error(recognizer)
        recognizer.on_recognized(make_result(), 0, "s1")

        assert len(callbacks.results) == 1
        assert callbacks.results[0].reason is ResultReason.CANCELED

    def test_observer_fires_on_every_cancel(self, recognizer, transcriber, callbacks):
        events = []
        transcriber.canceled = events.append
        attach(recognizer, callbacks)

        cancel_with_service_error(recognizer)
        cancel_with_service_error(recognizer)

        assert len(events) == 2
        assert len(callbacks.results) == 1

    def test_throwing_observer_does_not_block_callback(self, recognizer, transcriber, callbacks):
        transcriber.canceled = raising_handler
        attach(recognizer, callbacks)

        cancel_with_service_error(recognizer)

        assert len(callbacks.results) == 1
        assert not recognizer.request_session.callbacks.attached

    def test_callback_error_swallowed_not_forwarded(self, recognizer):
        recorder = CallbackRecorder(raise_on_success=ValueError("consumer broke"))
        attach(recognizer, recorder)

        cancel_with_service_error(recognizer)

        assert len(recorder.results) == 1
        assert recorder.errors == []
        assert not recognizer.request_session.callbacks.attached

    @pytest.mark.parametrize(
        "error_code, encoded",
        [
            (CancellationErrorCode.NO_ERROR, "NoError"),
            (CancellationErrorCode.AUTHENTICATION_FAILURE, "AuthenticationFailure"),
            (CancellationErrorCode.CONNECTION_FAILURE, "ConnectionFailure"),
            (CancellationErrorCode.SERVICE_TIMEOUT, "ServiceTimeout"),
        ],
    )
    def test_error_code_encoding(self, recognizer, callbacks, error_code, encoded):
        attach(recognizer, callbacks)

        recognizer.cancel("s1", "r1", CancellationReason.END_OF_STREAM, error_code, "")

        assert callbacks.results[0].properties[CANCELLATION_ERROR_CODE_PROPERTY] == encoded


class TestCancelRecognitionLocal:
    @pytest.mark.asyncio
    async def test_stops_session_and_uses_its_ids(self, recognizer, transcriber, callbacks):
        events = []
        transcriber.canceled = events.append
        await recognizer.recognize(callbacks.on_success, callbacks.on_error)
        session = recognizer.request_session

        recognizer.cancel_recognition_local(
            CancellationReason.ERROR, CancellationErrorCode.CONNECTION_FAILURE, "socket closed"
        )

        assert not recognizer.is_recognizing
        assert events[0].session_id == session.session_id
        assert callbacks.results[0].result_id == session.request_id
        assert callbacks.results[0].error_details == "socket closed"

    def test_when_idle(self, recognizer, callbacks):
        attach(recognizer, callbacks)

        recognizer.cancel_recognition_local(
            CancellationReason.END_OF_STREAM, CancellationErrorCode.NO_ERROR, ""
        )

        assert len(callbacks.results) == 1
        assert not recognizer.is_recognizing
