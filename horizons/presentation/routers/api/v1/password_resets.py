"""Password reset resource routers.

Endpoints:
    POST /api/v1/password-reset-codes               - Request a reset code
    POST /api/v1/password-reset-codes/verification  - Check a code (not consumed)
    POST /api/v1/password-resets                    - Set the new password
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from horizons.application.commands import (
    CompletePasswordReset,
    RequestPasswordReset,
    VerifyPasswordResetCode,
)
from horizons.application.commands.handlers import (
    CompletePasswordResetHandler,
    RequestPasswordResetHandler,
    VerifyPasswordResetCodeHandler,
)
from horizons.core.container import (
    get_complete_password_reset_handler,
    get_request_password_reset_handler,
    get_verify_password_reset_code_handler,
)
from horizons.core.result import Failure, Success
from horizons.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from horizons.schemas.verification_schemas import (
    MessageResponse,
    PasswordResetCodeCreateRequest,
    PasswordResetCodeVerificationRequest,
    PasswordResetCreateRequest,
)

password_reset_codes_router = APIRouter(
    prefix="/password-reset-codes",
    tags=["Password Reset Codes"],
)

password_resets_router = APIRouter(
    prefix="/password-resets",
    tags=["Password Resets"],
)


@password_reset_codes_router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    responses={503: {"model": ProblemDetails}},
    summary="Request password reset code",
    description="Sends a 6-digit code if the account exists. Same answer either way.",
)
async def create_password_reset_code(
    request: Request,
    data: PasswordResetCodeCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/password-reset-codes → 202 Accepted"""
    match await handler.handle(RequestPasswordReset(email=data.email)):
        case Success(value=response):
            return MessageResponse(message=response.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@password_reset_codes_router.post(
    "/verification",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={400: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Verify password reset code",
    description="Checks a reset code without consuming it.",
)
async def verify_password_reset_code(
    request: Request,
    data: PasswordResetCodeVerificationRequest,
    handler: VerifyPasswordResetCodeHandler = Depends(get_verify_password_reset_code_handler),
) -> MessageResponse | JSONResponse:
    match await handler.handle(VerifyPasswordResetCode(email=data.email, code=data.code)):
        case Success():
            return MessageResponse(message="Code is valid.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@password_resets_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={400: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Reset password",
    description="Sets a new password with a valid reset code and consumes the code.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: CompletePasswordResetHandler = Depends(get_complete_password_reset_handler),
) -> MessageResponse | JSONResponse:
    command = CompletePasswordReset(
        email=data.email, code=data.code, new_password=data.new_password
    )
    match await handler.handle(command):
        case Success():
            return MessageResponse(message="Password updated.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
