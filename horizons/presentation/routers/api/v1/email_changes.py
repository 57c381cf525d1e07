"""Email change resource routers (authenticated).

Endpoints:
    POST /api/v1/email-change-codes  - Send a code to the new address
    POST /api/v1/email-changes       - Apply the change with the code
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from horizons.application.commands import CompleteEmailChange, RequestEmailChange
from horizons.application.commands.handlers import (
    CompleteEmailChangeHandler,
    RequestEmailChangeHandler,
)
from horizons.core.container import (
    get_complete_email_change_handler,
    get_request_email_change_handler,
)
from horizons.core.result import Failure, Success
from horizons.presentation.routers.api.middleware import CurrentUser, get_current_user
from horizons.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from horizons.schemas.verification_schemas import (
    EmailChangeCodeCreateRequest,
    EmailChangeCreateRequest,
    MessageResponse,
    ProfileResponse,
)

email_change_codes_router = APIRouter(prefix="/email-change-codes", tags=["Email Changes"])
email_changes_router = APIRouter(prefix="/email-changes", tags=["Email Changes"])


@email_change_codes_router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=MessageResponse,
    responses={
        400: {"model": ProblemDetails},
        409: {"model": ProblemDetails},
        502: {"model": ProblemDetails},
        503: {"model": ProblemDetails},
    },
    summary="Request email change",
)
async def create_email_change_code(
    request: Request,
    data: EmailChangeCodeCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: RequestEmailChangeHandler = Depends(get_request_email_change_handler),
) -> MessageResponse | JSONResponse:
    command = RequestEmailChange(user_id=current_user.user_id, new_email=data.new_email)
    match await handler.handle(command):
        case Success():
            return MessageResponse(message="A verification code was sent to the new address.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@email_changes_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ProfileResponse,
    responses={400: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Confirm email change",
)
async def create_email_change(
    request: Request,
    data: EmailChangeCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: CompleteEmailChangeHandler = Depends(get_complete_email_change_handler),
) -> ProfileResponse | JSONResponse:
    command = CompleteEmailChange(user_id=current_user.user_id, code=data.code)
    match await handler.handle(command):
        case Success(value=profile):
            return ProfileResponse(**profile.to_dict())
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
