"""Command handlers, one per verification operation."""

from horizons.application.commands.handlers.complete_email_change_handler import (
    CompleteEmailChangeHandler,
)
from horizons.application.commands.handlers.complete_invite_handler import (
    CompleteInviteHandler,
    InviteCompletion,
)
from horizons.application.commands.handlers.complete_password_reset_handler import (
    CompletePasswordResetHandler,
)
from horizons.application.commands.handlers.invite_user_handler import (
    InvitationResult,
    InviteUserHandler,
)
from horizons.application.commands.handlers.request_email_change_handler import (
    RequestEmailChangeHandler,
)
from horizons.application.commands.handlers.request_password_reset_handler import (
    PasswordResetRequestResponse,
    RequestPasswordResetHandler,
)
from horizons.application.commands.handlers.verify_password_reset_code_handler import (
    VerifyPasswordResetCodeHandler,
)

__all__ = [
    "CompleteEmailChangeHandler",
    "CompleteInviteHandler",
    "CompletePasswordResetHandler",
    "InvitationResult",
    "InviteCompletion",
    "InviteUserHandler",
    "PasswordResetRequestResponse",
    "RequestEmailChangeHandler",
    "RequestPasswordResetHandler",
    "VerifyPasswordResetCodeHandler",
]
