"""AuthProviderProtocol - port for the managed authentication provider.

The provider is the source of truth for credentials and login emails.
"""

from typing import Protocol

from horizons.core.result import Result
from horizons.domain.entities import AuthAccount, AuthSession
from horizons.domain.errors import AuthProviderError


class AuthProviderProtocol(Protocol):
    """Identity management operations used by the verification flows."""

    async def find_account_by_email(self, email: str) -> Result[AuthAccount | None, AuthProviderError]:
        """Look up an account; Success(None) when no account uses ``email``."""
        ...

    async def create_account(self, email: str) -> Result[AuthAccount, AuthProviderError]:
        """Create an unconfirmed account without a password."""
        ...

    async def delete_account(self, user_id: str) -> Result[None, AuthProviderError]:
        """Delete an account (compensation after a failed onboarding)."""
        ...

    async def set_password(self, user_id: str, password: str) -> Result[None, AuthProviderError]:
        """Replace the account password."""
        ...

    async def set_email(
        self, user_id: str, email: str, *, confirmed: bool
    ) -> Result[AuthAccount, AuthProviderError]:
        """Set the login email, optionally marking it confirmed."""
        ...

    async def authenticate(self, email: str, password: str) -> Result[AuthSession, AuthProviderError]:
        """Password sign-in."""
        ...

    async def get_user(self, access_token: str) -> Result[AuthAccount, AuthProviderError]:
        """Resolve a bearer access token to its account."""
        ...
