"""RTZR implementation of the TranscriptionJobClient interface."""

import json

import requests
from pydantic import ValidationError

from rtzr_transcriber.domain.models import (
    AccessToken,
    AudioPayload,
    JobSnapshot,
    TranscriptionConfig,
)
from rtzr_transcriber.exceptions import (
    InvalidRequestError,
    SubmitFailedError,
    TransportError,
)
from rtzr_transcriber.logging import setup_logging

from .interfaces import TranscriptionJobClient

logger = setup_logging()

# Status codes after which a later status read may succeed.
RETRYABLE_STATUS_CODES = frozenset({408, 429})


class RtzrJobClient(TranscriptionJobClient):
    """Submits batch transcription jobs to RTZR and reads their status."""

    def __init__(self, session: requests.Session, base_url: str, timeout: float):
        self._session = session
        self._url = f"{base_url.rstrip('/')}/v1/transcribe"
        self._timeout = timeout

    def submit(
        self, token: AccessToken, audio: AudioPayload, config: TranscriptionConfig
    ) -> str:
        """
        Uploads audio with its config as multipart form data.

        Submission is not idempotent on the provider side, so a failed upload
        is reported and never re-sent from here.
        """
        if not audio.data:
            raise InvalidRequestError("audio payload is empty")

        try:
            response = self._session.post(
                self._url,
                files={"file": (audio.file_name, audio.data, audio.media_type)},
                data={"config": json.dumps(config.to_provider_payload())},
                headers={"accept": "application/json", **token.authorization_header},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.exception("RTZR job submission request failed")
            raise SubmitFailedError(f"request failed: {e}", cause=e) from e

        if not response.ok:
            logger.error(
                "RTZR job submission rejected",
                extra={"status_code": response.status_code, "body": response.text},
            )
            raise SubmitFailedError(f"HTTP {response.status_code}: {response.text}")

        try:
            body = response.json()
        except ValueError as e:
            raise SubmitFailedError(
                f"malformed response: {response.text}", cause=e
            ) from e

        job_id = body.get("id") if isinstance(body, dict) else None
        if not isinstance(job_id, str) or not job_id:
            raise SubmitFailedError(f"response has no job id: {response.text}")

        return job_id

    def fetch_status(self, token: AccessToken, job_id: str) -> JobSnapshot:
        try:
            response = self._session.get(
                f"{self._url}/{job_id}",
                headers={"accept": "application/json", **token.authorization_header},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"status request failed: {e}", cause=e) from e

        if not response.ok:
            retryable = (
                response.status_code >= 500
                or response.status_code in RETRYABLE_STATUS_CODES
            )
            raise TransportError(
                f"status request returned HTTP {response.status_code}: {response.text}",
                retryable=retryable,
            )

        try:
            return JobSnapshot.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise TransportError(
                f"malformed status response: {response.text}", cause=e
            ) from e
