from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from rtzr_transcriber.domain import AccessToken, AudioPayload, Credentials


def make_response(
    status_code: int = 200, json_body=None, text: str | None = None
) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text if text is not None else str(json_body)
    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="client-id", client_secret="client-secret")


@pytest.fixture
def token() -> AccessToken:
    return AccessToken(value="jwt-token", expire_at=1700000000)


@pytest.fixture
def audio() -> AudioPayload:
    return AudioPayload(data=b"RIFF....WAVEfmt ")


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()
