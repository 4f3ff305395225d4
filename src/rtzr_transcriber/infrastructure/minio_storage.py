"""MinIO implementation of the StorageClient interface."""

from minio import Minio

from rtzr_transcriber.exceptions import StorageDownloadError
from rtzr_transcriber.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Reads recordings from MinIO or any S3-compatible store."""

    def __init__(self, client: Minio):
        self._client = client

    def download(self, bucket_name: str, object_name: str) -> bytes:
        response = None
        try:
            response = self._client.get_object(bucket_name, object_name)
            data = response.read()
        except Exception as e:
            logger.exception(
                "Recording download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e
        finally:
            if response is not None:
                response.close()
                response.release_conn()

        logger.info(
            "Recording downloaded",
            extra={
                "bucket_name": bucket_name,
                "object_name": object_name,
                "size": len(data),
            },
        )
        return data
