"""Abstract interface for asynchronous transcription jobs."""

from abc import ABC, abstractmethod

from rtzr_transcriber.domain.models import (
    AccessToken,
    AudioPayload,
    JobSnapshot,
    TranscriptionConfig,
)


class TranscriptionJobClient(ABC):
    """Submits transcription jobs and reads their status."""

    @abstractmethod
    def submit(
        self, token: AccessToken, audio: AudioPayload, config: TranscriptionConfig
    ) -> str:
        """
        Uploads audio and starts a transcription job.

        Args:
            token: Bearer token from the credential provider.
            audio: The audio to transcribe.
            config: Model and diarization options.

        Returns:
            The provider-assigned job id.

        Raises:
            InvalidRequestError: If the audio is empty.
            SubmitFailedError: If the provider does not accept the job.
        """

    @abstractmethod
    def fetch_status(self, token: AccessToken, job_id: str) -> JobSnapshot:
        """
        Reads the current state of a job once.

        Raises:
            TransportError: If the status could not be read. ``retryable``
                tells the caller whether another attempt may succeed.
        """
