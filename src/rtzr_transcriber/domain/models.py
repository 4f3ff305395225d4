"""Domain models for the transcription orchestrator."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Credentials(BaseModel, frozen=True):
    """Provider client credentials supplied at process start."""

    client_id: str
    client_secret: str


class AccessToken(BaseModel, frozen=True):
    """Short-lived bearer token owned by a single transcription call."""

    value: str
    expire_at: int | None = None

    @property
    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.value}"}


class AudioPayload(BaseModel, frozen=True):
    """Raw audio bytes with the media type declared to the provider."""

    data: bytes
    media_type: str = "audio/wav"
    file_name: str = "recording.wav"


class TranscriptionModel(str, Enum):
    """Provider-supported transcription models."""

    SOMMERS = "sommers"
    WHISPER = "whisper"


class TranscriptionConfig(BaseModel, frozen=True):
    """Per-request transcription options sent alongside the audio."""

    model: TranscriptionModel = TranscriptionModel.SOMMERS
    use_diarization: bool = True
    speaker_count: int = 2
    use_itn: bool | None = None
    use_disfluency_filter: bool | None = None
    use_profanity_filter: bool | None = None
    use_paragraph_splitter: bool | None = None

    @model_validator(mode="after")
    def _check_speaker_count(self) -> "TranscriptionConfig":
        if self.use_diarization and self.speaker_count < 1:
            raise ValueError(
                "speaker_count must be at least 1 when diarization is enabled"
            )
        return self

    def to_provider_payload(self) -> dict[str, Any]:
        """Builds the JSON config document expected by the transcribe endpoint."""
        payload: dict[str, Any] = {
            "model_name": self.model.value,
            "use_diarization": self.use_diarization,
        }
        if self.use_diarization:
            payload["diarization"] = {"spk_count": self.speaker_count}

        optional_flags = {
            "use_itn": self.use_itn,
            "use_disfluency_filter": self.use_disfluency_filter,
            "use_profanity_filter": self.use_profanity_filter,
            "use_paragraph_splitter": self.use_paragraph_splitter,
        }
        payload.update({k: v for k, v in optional_flags.items() if v is not None})
        return payload


class PollingPolicy(BaseModel, frozen=True):
    """
    Bounds for the job status polling loop.

    Whichever limit is reached first ends the loop: the attempt count or the
    total elapsed time. Delays between attempts start at ``initial_delay`` and
    grow by ``multiplier`` up to ``max_delay``.
    """

    initial_delay: float = Field(default=5.0, gt=0)
    multiplier: float = Field(default=1.5, ge=1.0)
    max_delay: float = Field(default=30.0, gt=0)
    max_elapsed: float = Field(default=600.0, gt=0)
    max_attempts: int = Field(default=120, ge=1)

    def next_delay(self, delay: float) -> float:
        return min(delay * self.multiplier, self.max_delay)


class JobStatus(str, Enum):
    """Job states reported by the provider."""

    SUBMITTED = "submitted"
    TRANSCRIBING = "transcribing"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def parse(cls, raw: str | None) -> "JobStatus | None":
        """Returns the matching status, or None for values added by the provider."""
        try:
            return cls(raw)
        except ValueError:
            return None


class JobSnapshot(BaseModel, frozen=True):
    """
    One read of the provider's job status endpoint.

    ``results`` and ``error`` are kept as sent; their shape is checked only
    once the status is known, so a terminal status is never lost to a
    malformed body.
    """

    id: str
    status: str
    results: Any = None
    error: Any = None

    @property
    def failure_reason(self) -> str:
        if not self.error:
            return "provider reported failure without details"
        if not isinstance(self.error, dict):
            return str(self.error)
        code = self.error.get("code")
        message = self.error.get("message") or "no message"
        return f"{code}: {message}" if code else str(message)


class Utterance(BaseModel, frozen=True):
    """A single utterance of the transcript. Offsets are in milliseconds."""

    speaker: str | None
    start_ms: int = Field(ge=0)
    end_ms: int = Field(ge=0)
    text: str = Field(min_length=1)


class Transcript(BaseModel, frozen=True):
    """Ordered utterances produced from a completed job."""

    utterances: tuple[Utterance, ...]

    def to_text(self) -> str:
        """Formats utterances into a readable transcript."""
        return "\n".join(
            f"Speaker {u.speaker}: {u.text}" if u.speaker is not None else u.text
            for u in self.utterances
        )
