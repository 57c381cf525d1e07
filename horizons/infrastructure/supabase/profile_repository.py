"""Supabase PostgREST adapter implementing ProfileRepository.

All calls hit ``/rest/v1/profiles`` with the service-role key, so row-level
security does not apply.
"""

import re
from typing import Any

from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import Profile
from horizons.domain.errors import ProfileStoreError
from horizons.domain.validators import normalize_email
from horizons.infrastructure.supabase.base_client import SupabaseBaseClient

_PROFILES_PATH = "/rest/v1/profiles"
_RETURN_REPRESENTATION = "return=representation"
# "*" is the PostgREST alias for "%" in like patterns
_LIKE_SPECIALS = re.compile(r"([\\%_*])")


def _escape_like(value: str) -> str:
    return _LIKE_SPECIALS.sub(r"\\\1", value)


class SupabaseProfileRepository(SupabaseBaseClient[ProfileStoreError]):
    """PostgREST profiles adapter."""

    service_name = "supabase_rest"

    def _make_error(
        self,
        *,
        message: str,
        status_code: int | None = None,
        is_transient: bool = False,
    ) -> ProfileStoreError:
        return ProfileStoreError(
            code=(
                ErrorCode.PROFILE_STORE_UNAVAILABLE
                if is_transient
                else ErrorCode.PROFILE_STORE_REJECTED
            ),
            message=message,
            status_code=status_code,
            is_transient=is_transient,
        )

    async def _rows(
        self,
        *,
        method: str,
        operation: str,
        params: dict[str, str],
        json_data: dict[str, Any] | None = None,
        prefer: str | None = None,
    ) -> Result[list[dict[str, Any]], ProfileStoreError]:
        match await self._request(
            method=method,
            path=_PROFILES_PATH,
            operation=operation,
            params=params,
            json_data=json_data,
            extra_headers={"Prefer": prefer} if prefer else None,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        match self._parse_json(response, operation):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                pass

        if not isinstance(data, list):
            return Failure(error=self._make_error(message="Expected a list of rows"))
        return Success(value=data)

    async def _one_or_none(
        self, operation: str, params: dict[str, str]
    ) -> Result[Profile | None, ProfileStoreError]:
        match await self._rows(method="GET", operation=operation, params=params):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=rows):
                return Success(value=Profile.from_row(rows[0]) if rows else None)

    async def get_profile(self, user_id: str) -> Result[Profile | None, ProfileStoreError]:
        return await self._one_or_none(
            "get_profile", {"id": f"eq.{user_id}", "select": "*", "limit": "1"}
        )

    async def get_profile_by_email(self, email: str) -> Result[Profile | None, ProfileStoreError]:
        """Case-insensitive lookup; older rows may hold mixed-case emails."""
        pattern = _escape_like(normalize_email(email))
        return await self._one_or_none(
            "get_profile_by_email",
            {"email": f"ilike.{pattern}", "select": "*", "limit": "1"},
        )

    async def upsert_profile(
        self, user_id: str, fields: dict[str, Any]
    ) -> Result[Profile, ProfileStoreError]:
        match await self._rows(
            method="POST",
            operation="upsert_profile",
            params={"on_conflict": "id"},
            json_data={**fields, "id": user_id},
            prefer=f"resolution=merge-duplicates,{_RETURN_REPRESENTATION}",
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=rows):
                pass

        if not rows:
            return Failure(error=self._make_error(message="Upsert returned no row"))
        return Success(value=Profile.from_row(rows[0]))

    async def update_profile(
        self, user_id: str, fields: dict[str, Any]
    ) -> Result[Profile, ProfileStoreError]:
        match await self._rows(
            method="PATCH",
            operation="update_profile",
            params={"id": f"eq.{user_id}"},
            json_data=fields,
            prefer=_RETURN_REPRESENTATION,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=rows):
                pass

        if not rows:
            return Failure(
                error=ProfileStoreError(
                    code=ErrorCode.PROFILE_NOT_FOUND,
                    message="Profile not found",
                    status_code=404,
                )
            )
        return Success(value=Profile.from_row(rows[0]))
