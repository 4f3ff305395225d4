"""Handler for transcribing stored recordings."""

import threading

from rtzr_transcriber.config import RtzrConfig
from rtzr_transcriber.domain import (
    AudioPayload,
    PollingPolicy,
    Transcript,
    TranscriptionOrchestrator,
)
from rtzr_transcriber.exceptions import InvalidRequestError
from rtzr_transcriber.infrastructure.interfaces import StorageClient
from rtzr_transcriber.logging import setup_logging

logger = setup_logging()


class RecordingTranscriptionHandler:
    """Fetches a recording from storage and transcribes it."""

    def __init__(
        self,
        storage: StorageClient,
        orchestrator: TranscriptionOrchestrator,
        rtzr_config: RtzrConfig,
        policy: PollingPolicy,
        bucket_name: str,
    ):
        self._storage = storage
        self._orchestrator = orchestrator
        self._rtzr_config = rtzr_config
        self._policy = policy
        self._bucket_name = bucket_name

    def process(
        self, recording_id: str, cancel_event: threading.Event | None = None
    ) -> Transcript:
        """
        Transcribes the WAV recording stored under ``recordings/{recording_id}.wav``.

        Args:
            recording_id: Identifier of the recording.
            cancel_event: Optional signal that aborts the transcription.

        Returns:
            The transcript of the recording.

        Raises:
            InvalidRequestError: If the recording id is not a plain name.
            StorageDownloadError: If the recording cannot be downloaded.
            OrchestrationError: If transcription fails.
        """
        if not recording_id or "/" in recording_id:
            raise InvalidRequestError(f"invalid recording id '{recording_id}'")

        object_name = f"recordings/{recording_id}.wav"
        logger.info(
            "Processing recording",
            extra={"recording_id": recording_id, "bucket_name": self._bucket_name},
        )

        audio_data = self._storage.download(self._bucket_name, object_name)

        transcript = self._orchestrator.transcribe(
            credentials=self._rtzr_config.credentials,
            audio=AudioPayload(
                data=audio_data, media_type="audio/wav", file_name="recording.wav"
            ),
            config=self._rtzr_config.transcription,
            policy=self._policy,
            cancel_event=cancel_event,
        )

        logger.info(
            "Recording transcribed",
            extra={
                "recording_id": recording_id,
                "utterance_count": len(transcript.utterances),
            },
        )
        return transcript
