import pytest
from pydantic import ValidationError

from rtzr_transcriber.config import load_config
from rtzr_transcriber.domain import TranscriptionModel


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("RTZR_CLIENT_ID", "id-123")
    monkeypatch.setenv("RTZR_CLIENT_SECRET", "secret-456")
    monkeypatch.setenv("RTZR_MODEL", "whisper")
    monkeypatch.setenv("RTZR_SPEAKER_COUNT", "3")
    monkeypatch.setenv("POLL_MAX_ATTEMPTS", "7")
    monkeypatch.setenv("POLL_INITIAL_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("MINIO_BUCKET_NAME", "audio")

    config = load_config()

    assert config.rtzr.credentials.client_id == "id-123"
    assert config.rtzr.credentials.client_secret == "secret-456"
    assert config.rtzr.transcription.model is TranscriptionModel.WHISPER
    assert config.rtzr.transcription.speaker_count == 3
    assert config.polling.max_attempts == 7
    assert config.polling.initial_delay == 0.5
    assert config.minio.bucket_name == "audio"


def test_load_config_defaults(monkeypatch):
    for name in (
        "RTZR_BASE_URL",
        "RTZR_REQUEST_TIMEOUT_SECONDS",
        "RTZR_MODEL",
        "RTZR_USE_DIARIZATION",
        "RTZR_SPEAKER_COUNT",
        "POLL_MAX_ATTEMPTS",
        "POLL_MAX_ELAPSED_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.rtzr.base_url == "https://openapi.vito.ai"
    assert config.rtzr.request_timeout_seconds == 30.0
    assert config.rtzr.use_diarization is True
    assert config.rtzr.speaker_count == 2
    assert config.polling.max_attempts == 120
    assert config.polling.max_elapsed == 600.0


def test_load_config_diarization_flag(monkeypatch):
    monkeypatch.setenv("RTZR_USE_DIARIZATION", "false")

    assert load_config().rtzr.transcription.use_diarization is False


def test_load_config_rejects_invalid_policy(monkeypatch):
    monkeypatch.setenv("POLL_BACKOFF_MULTIPLIER", "0.1")

    with pytest.raises(ValidationError):
        load_config()


def test_config_is_immutable():
    config = load_config()

    with pytest.raises(ValidationError):
        config.rtzr = None
