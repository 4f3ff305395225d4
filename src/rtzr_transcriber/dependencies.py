"""Dependency injection configuration for the transcriber API."""

import requests
from minio import Minio

from rtzr_transcriber.config import load_config
from rtzr_transcriber.domain import (
    JobPoller,
    TranscriptionOrchestrator,
    TranscriptMapper,
)
from rtzr_transcriber.handlers import RecordingTranscriptionHandler
from rtzr_transcriber.infrastructure import (
    MinioStorageClient,
    RtzrCredentialProvider,
    RtzrJobClient,
)
from rtzr_transcriber.infrastructure.interfaces import StorageClient
from rtzr_transcriber.logging import setup_logging

logger = setup_logging()

_config = load_config()

# MinIO setup
_minio_client = Minio(
    endpoint=_config.minio.endpoint,
    access_key=_config.minio.user,
    secret_key=_config.minio.password,
    secure=_config.minio.secure,
)
_storage = MinioStorageClient(_minio_client)

# RTZR setup, one HTTP session shared by every call
_http_session = requests.Session()
_credential_provider = RtzrCredentialProvider(
    _http_session, _config.rtzr.base_url, _config.rtzr.request_timeout_seconds
)
_job_client = RtzrJobClient(
    _http_session, _config.rtzr.base_url, _config.rtzr.request_timeout_seconds
)

_orchestrator = TranscriptionOrchestrator(
    _credential_provider,
    _job_client,
    JobPoller(_job_client),
    TranscriptMapper(),
)

_handler = RecordingTranscriptionHandler(
    _storage, _orchestrator, _config.rtzr, _config.polling, _config.minio.bucket_name
)


def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    return _storage


def get_orchestrator() -> TranscriptionOrchestrator:
    """Returns the configured transcription orchestrator."""
    return _orchestrator


def get_handler() -> RecordingTranscriptionHandler:
    """Returns the configured recording handler."""
    return _handler
