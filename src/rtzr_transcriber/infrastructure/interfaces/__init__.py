"""Infrastructure interface exports."""

from .credential_provider import CredentialProvider
from .storage_client import StorageClient
from .transcription_job_client import TranscriptionJobClient

__all__ = ["CredentialProvider", "StorageClient", "TranscriptionJobClient"]
