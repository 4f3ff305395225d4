"""Core business logic for transcribing a recording through the provider."""

import threading

from rtzr_transcriber.exceptions import PollCancelledError
from rtzr_transcriber.infrastructure.interfaces.credential_provider import (
    CredentialProvider,
)
from rtzr_transcriber.infrastructure.interfaces.transcription_job_client import (
    TranscriptionJobClient,
)
from rtzr_transcriber.logging import setup_logging

from .job_poller import JobPoller
from .models import (
    AudioPayload,
    Credentials,
    PollingPolicy,
    Transcript,
    TranscriptionConfig,
)
from .transcript_mapper import TranscriptMapper

logger = setup_logging()


class TranscriptionOrchestrator:
    """Runs authenticate, submit, poll and map as one transcription call."""

    def __init__(
        self,
        credential_provider: CredentialProvider,
        job_client: TranscriptionJobClient,
        poller: JobPoller,
        mapper: TranscriptMapper,
    ):
        self._credential_provider = credential_provider
        self._job_client = job_client
        self._poller = poller
        self._mapper = mapper

    def transcribe(
        self,
        credentials: Credentials,
        audio: AudioPayload,
        config: TranscriptionConfig,
        policy: PollingPolicy | None = None,
        cancel_event: threading.Event | None = None,
    ) -> Transcript:
        """
        Transcribes audio and returns the speaker-labelled transcript.

        The first failing stage ends the call and its error is raised as is;
        nothing is retried here. Callers decide whether to run the whole call
        again.

        Args:
            credentials: Provider client id and secret.
            audio: The recording to transcribe.
            config: Model and diarization options.
            policy: Polling bounds. Defaults to ``PollingPolicy()``.
            cancel_event: Optional signal that aborts the call when set.

        Returns:
            The validated transcript.

        Raises:
            AuthFailedError: If authentication fails.
            InvalidRequestError: If the audio is empty.
            SubmitFailedError: If the job is not accepted.
            JobFailedError: If the provider fails the job.
            PollTimeoutError: If the job does not finish within the policy.
            PollCancelledError: If ``cancel_event`` is set.
            TransportError: If a provider call cannot complete or the result is
                malformed.
        """
        policy = policy or PollingPolicy()
        cancel_event = cancel_event or threading.Event()

        self._raise_if_cancelled(cancel_event, "authentication")
        token = self._credential_provider.authenticate(credentials)

        self._raise_if_cancelled(cancel_event, "submission")
        job_id = self._job_client.submit(token, audio, config)
        logger.info(
            "Transcription job submitted",
            extra={
                "job_id": job_id,
                "model": config.model.value,
                "audio_bytes": len(audio.data),
            },
        )

        payload = self._poller.poll_until_done(token, job_id, policy, cancel_event)
        transcript = self._mapper.map(payload, diarization=config.use_diarization)

        logger.info(
            "Audio transcription successful",
            extra={"job_id": job_id, "utterance_count": len(transcript.utterances)},
        )
        return transcript

    @staticmethod
    def _raise_if_cancelled(cancel_event: threading.Event, stage: str) -> None:
        if cancel_event.is_set():
            raise PollCancelledError(None, attempts=0, elapsed=0.0, stage=stage)
