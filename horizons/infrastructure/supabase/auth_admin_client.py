"""Supabase GoTrue adapter implementing AuthProviderProtocol.

Admin operations use the service-role key against ``/auth/v1/admin/users``.
Sign-in uses the password grant of ``/auth/v1/token``; bearer resolution
uses ``/auth/v1/user`` with the caller's access token.
"""

from typing import Any

from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import AuthAccount, AuthSession
from horizons.domain.errors import AuthProviderError
from horizons.domain.validators import mask_email, normalize_email
from horizons.infrastructure.supabase.base_client import SupabaseBaseClient

_ADMIN_USERS_PATH = "/auth/v1/admin/users"
_LIST_PAGE_SIZE = 1000


def _to_account(data: dict[str, Any]) -> AuthAccount:
    return AuthAccount(
        user_id=str(data["id"]),
        email=str(data.get("email") or ""),
        email_confirmed=bool(data.get("email_confirmed_at")),
    )


class SupabaseAuthAdminClient(SupabaseBaseClient[AuthProviderError]):
    """GoTrue admin client."""

    service_name = "supabase_auth"

    def _make_error(
        self,
        *,
        message: str,
        status_code: int | None = None,
        is_transient: bool = False,
    ) -> AuthProviderError:
        return AuthProviderError(
            code=(
                ErrorCode.AUTH_PROVIDER_UNAVAILABLE
                if is_transient
                else ErrorCode.AUTH_PROVIDER_REJECTED
            ),
            message=message,
            status_code=status_code,
            is_transient=is_transient,
        )

    async def _account_call(
        self,
        *,
        method: str,
        path: str,
        operation: str,
        json_data: dict[str, Any] | None = None,
    ) -> Result[AuthAccount, AuthProviderError]:
        match await self._request(
            method=method, path=path, operation=operation, json_data=json_data
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

        # Admin endpoints answer with the user object, older GoTrue wraps it
        user = data.get("user", data) if isinstance(data, dict) else None
        if not isinstance(user, dict) or "id" not in user:
            return Failure(error=self._make_error(message="Malformed user object"))
        return Success(value=_to_account(user))

    async def find_account_by_email(
        self, email: str
    ) -> Result[AuthAccount | None, AuthProviderError]:
        """Scan the admin user list for ``email`` (case-insensitive).

        GoTrue has no lookup-by-email admin endpoint, so pages are walked
        until a short page is returned.
        """
        wanted = normalize_email(email)
        page = 1
        while True:
            match await self._request(
                method="GET",
                path=_ADMIN_USERS_PATH,
                operation="list_users",
                params={"page": str(page), "per_page": str(_LIST_PAGE_SIZE)},
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=response):
                    pass

            match self._parse_json(response, "list_users"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=data):
                    pass

            users = data.get("users", []) if isinstance(data, dict) else data
            if not isinstance(users, list):
                return Failure(error=self._make_error(message="Malformed user list"))

            for user in users:
                if normalize_email(str(user.get("email") or "")) == wanted:
                    return Success(value=_to_account(user))

            if len(users) < _LIST_PAGE_SIZE:
                return Success(value=None)
            page += 1

    async def create_account(self, email: str) -> Result[AuthAccount, AuthProviderError]:
        result = await self._account_call(
            method="POST",
            path=_ADMIN_USERS_PATH,
            operation="create_user",
            json_data={"email": email, "email_confirm": False},
        )
        if isinstance(result, Success):
            self._logger.info("auth_account_created", email=mask_email(email))
        return result

    async def delete_account(self, user_id: str) -> Result[None, AuthProviderError]:
        match await self._request(
            method="DELETE",
            path=f"{_ADMIN_USERS_PATH}/{user_id}",
            operation="delete_user",
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        error_result = self._check_status(response, "delete_user")
        if error_result is not None:
            return error_result
        self._logger.info("auth_account_deleted", user_id=user_id)
        return Success(value=None)

    async def set_password(self, user_id: str, password: str) -> Result[None, AuthProviderError]:
        match await self._account_call(
            method="PUT",
            path=f"{_ADMIN_USERS_PATH}/{user_id}",
            operation="update_user_password",
            json_data={"password": password},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success():
                return Success(value=None)

    async def set_email(
        self, user_id: str, email: str, *, confirmed: bool
    ) -> Result[AuthAccount, AuthProviderError]:
        return await self._account_call(
            method="PUT",
            path=f"{_ADMIN_USERS_PATH}/{user_id}",
            operation="update_user_email",
            json_data={"email": email, "email_confirm": confirmed},
        )

    async def authenticate(self, email: str, password: str) -> Result[AuthSession, AuthProviderError]:
        match await self._request(
            method="POST",
            path="/auth/v1/token",
            operation="sign_in",
            params={"grant_type": "password"},
            json_data={"email": email, "password": password},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        if response.status_code in (400, 401):
            return Failure(
                error=AuthProviderError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid login credentials",
                    status_code=response.status_code,
                )
            )

        match self._parse_json(response, "sign_in"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                pass

        if not isinstance(data, dict) or not data.get("access_token"):
            return Failure(error=self._make_error(message="Malformed session object"))
        return Success(
            value=AuthSession(
                access_token=data["access_token"],
                refresh_token=data.get("refresh_token", ""),
                expires_in=data.get("expires_in"),
                token_type=data.get("token_type", "bearer"),
            )
        )

    async def get_user(self, access_token: str) -> Result[AuthAccount, AuthProviderError]:
        match await self._request(
            method="GET",
            path="/auth/v1/user",
            operation="get_user",
            access_token=access_token,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        if response.status_code in (401, 403):
            return Failure(
                error=AuthProviderError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid or expired access token",
                    status_code=response.status_code,
                )
            )

        match self._parse_json(response, "get_user"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=data):
                pass

        if not isinstance(data, dict) or "id" not in data:
            return Failure(error=self._make_error(message="Malformed user object"))
        return Success(value=_to_account(data))
