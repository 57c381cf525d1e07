"""Domain enums package."""

from horizons.domain.enums.user_role import UserRole
from horizons.domain.enums.verification_namespace import VerificationNamespace

__all__ = ["UserRole", "VerificationNamespace"]
