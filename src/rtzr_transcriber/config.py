"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

from rtzr_transcriber.domain.models import (
    Credentials,
    PollingPolicy,
    TranscriptionConfig,
    TranscriptionModel,
)


class RtzrConfig(BaseModel, frozen=True):
    """RTZR API configuration."""

    client_id: str
    client_secret: str
    base_url: str = "https://openapi.vito.ai"
    request_timeout_seconds: float = 30.0
    model: TranscriptionModel = TranscriptionModel.SOMMERS
    use_diarization: bool = True
    speaker_count: int = 2

    @property
    def credentials(self) -> Credentials:
        return Credentials(client_id=self.client_id, client_secret=self.client_secret)

    @property
    def transcription(self) -> TranscriptionConfig:
        return TranscriptionConfig(
            model=self.model,
            use_diarization=self.use_diarization,
            speaker_count=self.speaker_count,
        )


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "recordings"
    secure: bool = False


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    rtzr: RtzrConfig
    polling: PollingPolicy
    minio: MinioConfig


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        rtzr=RtzrConfig(
            client_id=os.getenv("RTZR_CLIENT_ID", ""),
            client_secret=os.getenv("RTZR_CLIENT_SECRET", ""),
            base_url=os.getenv("RTZR_BASE_URL", "https://openapi.vito.ai"),
            request_timeout_seconds=float(
                os.getenv("RTZR_REQUEST_TIMEOUT_SECONDS", "30")
            ),
            model=TranscriptionModel(os.getenv("RTZR_MODEL", "sommers")),
            use_diarization=_env_bool("RTZR_USE_DIARIZATION", "true"),
            speaker_count=int(os.getenv("RTZR_SPEAKER_COUNT", "2")),
        ),
        polling=PollingPolicy(
            initial_delay=float(os.getenv("POLL_INITIAL_DELAY_SECONDS", "5")),
            multiplier=float(os.getenv("POLL_BACKOFF_MULTIPLIER", "1.5")),
            max_delay=float(os.getenv("POLL_MAX_DELAY_SECONDS", "30")),
            max_elapsed=float(os.getenv("POLL_MAX_ELAPSED_SECONDS", "600")),
            max_attempts=int(os.getenv("POLL_MAX_ATTEMPTS", "120")),
        ),
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET_NAME", "recordings"),
            secure=_env_bool("MINIO_SECURE", "false"),
        ),
    )
