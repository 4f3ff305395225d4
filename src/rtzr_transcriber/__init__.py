from rtzr_transcriber.domain import (
    AudioPayload,
    Credentials,
    PollingPolicy,
    Transcript,
    TranscriptionConfig,
    TranscriptionModel,
    TranscriptionOrchestrator,
    Utterance,
)
from rtzr_transcriber.exceptions import (
    AuthFailedError,
    InvalidRequestError,
    JobFailedError,
    OrchestrationError,
    PollCancelledError,
    PollTimeoutError,
    SubmitFailedError,
    TranscriptValidationError,
    TransportError,
)

__all__ = [
    "AudioPayload",
    "AuthFailedError",
    "Credentials",
    "InvalidRequestError",
    "JobFailedError",
    "OrchestrationError",
    "PollCancelledError",
    "PollTimeoutError",
    "PollingPolicy",
    "SubmitFailedError",
    "Transcript",
    "TranscriptValidationError",
    "TranscriptionConfig",
    "TranscriptionModel",
    "TranscriptionOrchestrator",
    "TransportError",
    "Utterance",
]
