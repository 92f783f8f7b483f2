from enum import Enum, auto


class RecognitionState(Enum):
    IDLE = auto()
    RECOGNIZING = auto()


VALID_TRANSITIONS: dict[RecognitionState, set[RecognitionState]] = {
    RecognitionState.IDLE: {RecognitionState.RECOGNIZING},
    RecognitionState.RECOGNIZING: {RecognitionState.IDLE},
}


class InvalidTransitionError(Exception):
    pass


def validate_transition(current: RecognitionState, target: RecognitionState) -> None:
    if target not in VALID_TRANSITIONS.get(current, set()):
        raise InvalidTransitionError(f"Cannot transition from {current.name} to {target.name}")
