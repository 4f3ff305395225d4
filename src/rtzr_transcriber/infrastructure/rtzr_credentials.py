"""RTZR implementation of the CredentialProvider interface."""

import requests

from rtzr_transcriber.domain.models import AccessToken, Credentials
from rtzr_transcriber.exceptions import AuthFailedError, TransportError
from rtzr_transcriber.logging import setup_logging

from .interfaces import CredentialProvider

logger = setup_logging()


class RtzrCredentialProvider(CredentialProvider):
    """Obtains bearer tokens from the RTZR authenticate endpoint."""

    def __init__(self, session: requests.Session, base_url: str, timeout: float):
        self._session = session
        self._url = f"{base_url.rstrip('/')}/v1/authenticate"
        self._timeout = timeout

    def authenticate(self, credentials: Credentials) -> AccessToken:
        """
        Exchanges the client id and secret for an access token.

        Empty credentials are rejected before any request is made. The
        provider's response body is kept on the error for diagnostics. A
        request that never gets an answer raises a retryable TransportError
        instead, since the credentials themselves were not judged.
        """
        if not credentials.client_id or not credentials.client_secret:
            raise AuthFailedError("client id and secret must be non-empty")

        try:
            response = self._session.post(
                self._url,
                data={
                    "client_id": credentials.client_id,
                    "client_secret": credentials.client_secret,
                },
                headers={"accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.exception("RTZR authentication request failed")
            raise TransportError(
                f"authentication request failed: {e}", cause=e, retryable=True
            ) from e

        if not response.ok:
            logger.error(
                "RTZR authentication rejected",
                extra={"status_code": response.status_code, "body": response.text},
            )
            raise AuthFailedError(f"HTTP {response.status_code}: {response.text}")

        try:
            body = response.json()
        except ValueError as e:
            raise AuthFailedError(
                f"malformed response: {response.text}", cause=e
            ) from e

        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise AuthFailedError(f"response has no access_token: {response.text}")

        logger.info(
            "RTZR access token obtained", extra={"expire_at": body.get("expire_at")}
        )
        return AccessToken(value=token, expire_at=body.get("expire_at"))
