"""Abstract interface for provider authentication."""

from abc import ABC, abstractmethod

from rtzr_transcriber.domain.models import AccessToken, Credentials


class CredentialProvider(ABC):
    """Exchanges client credentials for a bearer token."""

    @abstractmethod
    def authenticate(self, credentials: Credentials) -> AccessToken:
        """
        Obtains a fresh access token.

        Args:
            credentials: Client id and secret issued by the provider.

        Returns:
            A short-lived access token. Implementations do not cache it.

        Raises:
            AuthFailedError: If the credentials are empty or rejected.
            TransportError: If the provider cannot be reached.
        """
