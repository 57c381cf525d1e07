"""Invitation resource routers.

Endpoints:
    POST /api/v1/invitations             - Create or re-send an invitation (admin)
    POST /api/v1/invitations/acceptance  - Accept an invitation (public)
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from horizons.application.commands import CompleteInvite, InviteUser
from horizons.application.commands.handlers import CompleteInviteHandler, InviteUserHandler
from horizons.core.container import get_complete_invite_handler, get_invite_user_handler
from horizons.core.result import Failure, Success
from horizons.presentation.routers.api.middleware import CurrentUser, get_current_user
from horizons.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from horizons.schemas.verification_schemas import (
    InvitationAcceptanceRequest,
    InvitationAcceptanceResponse,
    InvitationCreateRequest,
    InvitationCreateResponse,
    SessionResponse,
)

invitations_router = APIRouter(prefix="/invitations", tags=["Invitations"])


@invitations_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationCreateResponse,
    responses={
        400: {"model": ProblemDetails},
        401: {"model": ProblemDetails},
        403: {"model": ProblemDetails},
        503: {"model": ProblemDetails},
    },
    summary="Invite user",
    description="Creates the account if needed, upserts the profile and emails an invitation link.",
)
async def create_invitation(
    request: Request,
    data: InvitationCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: InviteUserHandler = Depends(get_invite_user_handler),
) -> InvitationCreateResponse | JSONResponse:
    command = InviteUser(
        actor_user_id=current_user.user_id,
        actor_role=current_user.role,
        name=data.name,
        email=data.email,
        role=data.role,
        client_id=data.client_id,
    )
    match await handler.handle(command):
        case Success(value=result):
            return InvitationCreateResponse(
                user_id=result.user_id, email=result.email, role=result.role
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)


@invitations_router.post(
    "/acceptance",
    status_code=status.HTTP_200_OK,
    response_model=InvitationAcceptanceResponse,
    responses={400: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Accept invitation",
    description="Sets the first password, confirms the email and signs the user in.",
)
async def accept_invitation(
    request: Request,
    data: InvitationAcceptanceRequest,
    handler: CompleteInviteHandler = Depends(get_complete_invite_handler),
) -> InvitationAcceptanceResponse | JSONResponse:
    command = CompleteInvite(email=data.email, token=data.token, new_password=data.new_password)
    match await handler.handle(command):
        case Success(value=completion):
            return InvitationAcceptanceResponse(
                user_id=completion.user_id,
                email=completion.email,
                session=(
                    SessionResponse(**asdict(completion.session))
                    if completion.session
                    else None
                ),
                profile=completion.profile.to_dict() if completion.profile else None,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
