"""Signature link resource router (public).

Endpoints:
    GET /api/v1/signature-links/validation?token=...  - Resolve a CRA signature link
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from horizons.application.queries import ResolveSignatureLink
from horizons.application.queries.handlers import ResolveSignatureLinkHandler
from horizons.core.container import get_resolve_signature_link_handler
from horizons.core.result import Failure, Success
from horizons.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from horizons.schemas.verification_schemas import SignatureLinkValidationResponse

signature_links_router = APIRouter(prefix="/signature-links", tags=["Signature Links"])


@signature_links_router.get(
    "/validation",
    status_code=status.HTTP_200_OK,
    response_model=SignatureLinkValidationResponse,
    responses={400: {"model": ProblemDetails}, 503: {"model": ProblemDetails}},
    summary="Validate signature link",
    description="Resolves a signature-link token to its user and CRA without consuming it.",
)
async def validate_signature_link(
    request: Request,
    token: str | None = Query(None, max_length=512),
    handler: ResolveSignatureLinkHandler = Depends(get_resolve_signature_link_handler),
) -> SignatureLinkValidationResponse | JSONResponse:
    match await handler.handle(ResolveSignatureLink(token=token)):
        case Success(value=target):
            return SignatureLinkValidationResponse(user_id=target.user_id, cra_id=target.cra_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, request)
