"""InferenceError hierarchy — str(error) is always the user-facing message."""
from src.constants import MSG_ANALYSIS_FAILED, MSG_NOT_IDENTIFIED


class InferenceError(Exception):
    pass


class RemoteCallError(InferenceError):
    def __init__(self, message: str = MSG_ANALYSIS_FAILED) -> None:
        super().__init__(message)


class UnrecognizedContentError(InferenceError):
    """The model reported that the image holds no recognizable food."""


class MalformedResponseError(InferenceError):
    def __init__(self, message: str = MSG_NOT_IDENTIFIED) -> None:
        super().__init__(message)
