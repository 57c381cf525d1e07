"""Request dependencies shared by the API routers."""

from horizons.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)

__all__ = ["CurrentUser", "get_current_user"]
