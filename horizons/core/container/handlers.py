"""Verification handler dependency factories.

Handlers are cheap and stateless; each request gets a fresh instance wired
to the app-scoped adapters.
"""

from typing import TYPE_CHECKING

from horizons.core.config import get_settings
from horizons.core.container.infrastructure import (
    get_auth_provider,
    get_email_service,
    get_logger,
    get_profile_repository,
    get_token_codec,
    get_verification_session_manager,
)

if TYPE_CHECKING:
    from horizons.application.commands.handlers import (
        CompleteEmailChangeHandler,
        CompleteInviteHandler,
        CompletePasswordResetHandler,
        InviteUserHandler,
        RequestEmailChangeHandler,
        RequestPasswordResetHandler,
        VerifyPasswordResetCodeHandler,
    )
    from horizons.application.queries.handlers import ResolveSignatureLinkHandler


# ============================================================================
# Password reset
# ============================================================================


def get_request_password_reset_handler() -> "RequestPasswordResetHandler":
    from horizons.application.commands.handlers import RequestPasswordResetHandler

    return RequestPasswordResetHandler(
        auth_provider=get_auth_provider(),
        sessions=get_verification_session_manager(),
        codec=get_token_codec(),
        email_service=get_email_service(),
        logger=get_logger(),
        code_ttl_seconds=get_settings().password_reset_code_ttl_seconds,
    )


def get_verify_password_reset_code_handler() -> "VerifyPasswordResetCodeHandler":
    from horizons.application.commands.handlers import VerifyPasswordResetCodeHandler

    return VerifyPasswordResetCodeHandler(sessions=get_verification_session_manager())


def get_complete_password_reset_handler() -> "CompletePasswordResetHandler":
    from horizons.application.commands.handlers import CompletePasswordResetHandler

    return CompletePasswordResetHandler(
        auth_provider=get_auth_provider(),
        sessions=get_verification_session_manager(),
        logger=get_logger(),
    )


# ============================================================================
# Invitations
# ============================================================================


def get_invite_user_handler() -> "InviteUserHandler":
    from horizons.application.commands.handlers import InviteUserHandler

    settings = get_settings()
    return InviteUserHandler(
        auth_provider=get_auth_provider(),
        profiles=get_profile_repository(),
        sessions=get_verification_session_manager(),
        codec=get_token_codec(),
        email_service=get_email_service(),
        logger=get_logger(),
        frontend_url=settings.frontend_url,
        token_ttl_seconds=settings.invite_token_ttl_seconds,
    )


def get_complete_invite_handler() -> "CompleteInviteHandler":
    from horizons.application.commands.handlers import CompleteInviteHandler

    return CompleteInviteHandler(
        auth_provider=get_auth_provider(),
        profiles=get_profile_repository(),
        sessions=get_verification_session_manager(),
        logger=get_logger(),
    )


# ============================================================================
# Email change
# ============================================================================


def get_request_email_change_handler() -> "RequestEmailChangeHandler":
    from horizons.application.commands.handlers import RequestEmailChangeHandler

    return RequestEmailChangeHandler(
        profiles=get_profile_repository(),
        sessions=get_verification_session_manager(),
        codec=get_token_codec(),
        email_service=get_email_service(),
        logger=get_logger(),
        code_ttl_seconds=get_settings().email_change_code_ttl_seconds,
    )


def get_complete_email_change_handler() -> "CompleteEmailChangeHandler":
    from horizons.application.commands.handlers import CompleteEmailChangeHandler

    return CompleteEmailChangeHandler(
        auth_provider=get_auth_provider(),
        profiles=get_profile_repository(),
        sessions=get_verification_session_manager(),
        logger=get_logger(),
    )


# ============================================================================
# Signature links
# ============================================================================


def get_resolve_signature_link_handler() -> "ResolveSignatureLinkHandler":
    from horizons.application.queries.handlers import ResolveSignatureLinkHandler

    return ResolveSignatureLinkHandler(
        sessions=get_verification_session_manager(), logger=get_logger()
    )
