"""Infrastructure layer exports."""

from .minio_storage import MinioStorageClient
from .rtzr_credentials import RtzrCredentialProvider
from .rtzr_jobs import RtzrJobClient

__all__ = ["MinioStorageClient", "RtzrCredentialProvider", "RtzrJobClient"]
