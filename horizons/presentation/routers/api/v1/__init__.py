"""API v1 routers.

RESTful resource-based endpoints for the verification flows.

Resources:
    /api/v1/password-reset-codes  - Password reset code requests and checks
    /api/v1/password-resets       - Password reset execution
    /api/v1/invitations           - Invitations and their acceptance
    /api/v1/email-change-codes    - Email change code requests
    /api/v1/email-changes         - Email change execution
    /api/v1/signature-links       - Public CRA signature links
"""

from fastapi import APIRouter

from horizons.core.config import get_settings
from horizons.presentation.routers.api.v1.email_changes import (
    email_change_codes_router,
    email_changes_router,
)
from horizons.presentation.routers.api.v1.invitations import invitations_router
from horizons.presentation.routers.api.v1.password_resets import (
    password_reset_codes_router,
    password_resets_router,
)
from horizons.presentation.routers.api.v1.signature_links import signature_links_router

v1_router = APIRouter(prefix=get_settings().api_v1_prefix)
for _router in (
    password_reset_codes_router,
    password_resets_router,
    invitations_router,
    email_change_codes_router,
    email_changes_router,
    signature_links_router,
):
    v1_router.include_router(_router)

__all__ = ["v1_router"]
