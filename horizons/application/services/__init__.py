"""Application services."""

from horizons.application.services.verification_session_manager import (
    VerificationSessionManager,
)

__all__ = ["VerificationSessionManager"]
