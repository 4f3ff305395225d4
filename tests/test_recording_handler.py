from unittest.mock import MagicMock

import pytest

from rtzr_transcriber.config import RtzrConfig
from rtzr_transcriber.domain import (
    PollingPolicy,
    Transcript,
    TranscriptionOrchestrator,
    Utterance,
)
from rtzr_transcriber.exceptions import InvalidRequestError, StorageDownloadError
from rtzr_transcriber.handlers import RecordingTranscriptionHandler
from rtzr_transcriber.infrastructure.interfaces import StorageClient

TRANSCRIPT = Transcript(
    utterances=(Utterance(speaker="0", start_ms=0, end_ms=5, text="hi"),)
)


@pytest.fixture
def storage():
    storage = MagicMock(spec=StorageClient)
    storage.download.return_value = b"wav-bytes"
    return storage


@pytest.fixture
def orchestrator():
    orchestrator = MagicMock(spec=TranscriptionOrchestrator)
    orchestrator.transcribe.return_value = TRANSCRIPT
    return orchestrator


@pytest.fixture
def rtzr_config():
    return RtzrConfig(client_id="id", client_secret="secret", speaker_count=3)


def _handler(storage, orchestrator, rtzr_config, policy=None):
    return RecordingTranscriptionHandler(
        storage,
        orchestrator,
        rtzr_config,
        policy or PollingPolicy(),
        "recordings-bucket",
    )


def test_process_downloads_recording_and_transcribes(
    storage, orchestrator, rtzr_config
):
    policy = PollingPolicy(max_attempts=5)

    result = _handler(storage, orchestrator, rtzr_config, policy).process("rec-1")

    assert result is TRANSCRIPT
    storage.download.assert_called_once_with(
        "recordings-bucket", "recordings/rec-1.wav"
    )
    kwargs = orchestrator.transcribe.call_args.kwargs
    assert kwargs["credentials"] == rtzr_config.credentials
    assert kwargs["audio"].data == b"wav-bytes"
    assert kwargs["audio"].media_type == "audio/wav"
    assert kwargs["config"].speaker_count == 3
    assert kwargs["policy"] is policy


@pytest.mark.parametrize("recording_id", ["", "../secret", "a/b"])
def test_process_rejects_path_like_ids(
    storage, orchestrator, rtzr_config, recording_id
):
    with pytest.raises(InvalidRequestError):
        _handler(storage, orchestrator, rtzr_config).process(recording_id)

    storage.download.assert_not_called()


def test_process_storage_failure_skips_transcription(
    storage, orchestrator, rtzr_config
):
    storage.download.side_effect = StorageDownloadError("recordings/rec-1.wav")

    with pytest.raises(StorageDownloadError):
        _handler(storage, orchestrator, rtzr_config).process("rec-1")

    orchestrator.transcribe.assert_not_called()
