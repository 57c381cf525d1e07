"""Bearer authentication dependencies.

Access tokens are issued by Supabase; they are resolved through the
authentication provider, then the caller's profile is loaded for its role
and active flag. Deactivated profiles are rejected with 403.

Usage:
    @router.post("/email-change-codes")
    async def create_email_change_code(
        current_user: CurrentUser = Depends(get_current_user),
    ): ...
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from horizons.core.container import get_auth_provider, get_logger, get_profile_repository
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Success
from horizons.domain.protocols import AuthProviderProtocol, LoggerProtocol, ProfileRepository

# Missing credentials are answered with 401 by get_current_user
bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated caller.

    Attributes:
        user_id: Supabase user id (also the profile id).
        email: Login email.
        role: Profile role as stored (e.g. "Admin"), None if unset.
    """

    user_id: str
    email: str
    role: str | None = None


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_provider: Annotated[AuthProviderProtocol, Depends(get_auth_provider)],
    profiles: Annotated[ProfileRepository, Depends(get_profile_repository)],
    logger: Annotated[LoggerProtocol, Depends(get_logger)],
) -> CurrentUser:
    """Resolve the bearer token to the calling user.

    Raises:
        HTTPException 401: Missing, invalid or expired token.
        HTTPException 403: Profile missing or deactivated.
        HTTPException 503: Authentication provider or profile store unavailable.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers=_UNAUTHORIZED_HEADERS,
        )

    match await auth_provider.get_user(credentials.credentials):
        case Failure(error=error) if error.code is ErrorCode.AUTH_PROVIDER_UNAVAILABLE:
            logger.error("auth_provider_unavailable", error=error)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Authentication service unavailable",
            )
        case Failure():
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired access token",
                headers=_UNAUTHORIZED_HEADERS,
            )
        case Success(value=account):
            pass

    match await profiles.get_profile(account.user_id):
        case Failure(error=error):
            logger.error("auth_profile_lookup_failed", error=error, user_id=account.user_id)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Profile store unavailable",
            )
        case Success(value=None):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Profile not found"
            )
        case Success(value=profile) if not profile.active:
            logger.warning("auth_inactive_profile", user_id=account.user_id)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Account deactivated"
            )
        case Success(value=profile):
            return CurrentUser(user_id=account.user_id, email=account.email, role=profile.role)
