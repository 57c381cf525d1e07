"""ProfileRepository - port for the ``profiles`` table."""

from typing import Any, Protocol

from horizons.core.result import Result
from horizons.domain.entities import Profile
from horizons.domain.errors import ProfileStoreError


class ProfileRepository(Protocol):
    """Profile persistence used by the verification flows."""

    async def get_profile(self, user_id: str) -> Result[Profile | None, ProfileStoreError]:
        ...

    async def get_profile_by_email(self, email: str) -> Result[Profile | None, ProfileStoreError]:
        ...

    async def upsert_profile(
        self, user_id: str, fields: dict[str, Any]
    ) -> Result[Profile, ProfileStoreError]:
        """Insert or update the profile whose id is ``user_id``."""
        ...

    async def update_profile(
        self, user_id: str, fields: dict[str, Any]
    ) -> Result[Profile, ProfileStoreError]:
        """Update an existing profile; failure if it does not exist."""
        ...
