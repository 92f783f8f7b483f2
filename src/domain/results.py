from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

CANCELLATION_ERROR_CODE_PROPERTY = "CancellationErrorCode"


class ResultReason(Enum):
    NO_MATCH = auto()
    CANCELED = auto()
    RECOGNIZING_SPEECH = auto()
    RECOGNIZED_SPEECH = auto()


class CancellationReason(Enum):
    ERROR = auto()
    END_OF_STREAM = auto()


class CancellationErrorCode(Enum):
    # Values are the names the service and property bags use on the wire.
    NO_ERROR = "NoError"
    AUTHENTICATION_FAILURE = "AuthenticationFailure"
    BAD_REQUEST = "BadRequest"
    TOO_MANY_REQUESTS = "TooManyRequests"
    FORBIDDEN = "Forbidden"
    CONNECTION_FAILURE = "ConnectionFailure"
    SERVICE_TIMEOUT = "ServiceTimeout"
    SERVICE_ERROR = "ServiceError"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    RUNTIME_ERROR = "RuntimeError"


def cancellation_properties(error_code: CancellationErrorCode) -> dict[str, str]:
    return {CANCELLATION_ERROR_CODE_PROPERTY: error_code.value}


@dataclass(frozen=True)
class RecognitionResult:
    result_id: str
    reason: ResultReason
    text: str | None = None
    duration: int | None = None
    offset: int | None = None
    language: str | None = None
    language_detection_confidence: str | None = None
    speaker_id: str | None = None
    error_details: str | None = None
    json: str | None = None
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))


@dataclass(frozen=True)
class SpeechRecognitionEvent:
    result: RecognitionResult
    offset: int
    session_id: str


@dataclass(frozen=True)
class TranscriptionCanceledEvent:
    reason: CancellationReason
    error_details: str
    error_code: CancellationErrorCode
    session_id: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
