"""User roles stored on profiles."""

from enum import Enum


class UserRole(str, Enum):
    """Profile roles, stored capitalized as the frontend expects."""

    ADMIN = "Admin"
    CONSULTANT = "Consultant"
    MANAGER = "Manager"

    @classmethod
    def parse(cls, raw: str) -> "UserRole | None":
        """Parse a role name case-insensitively.

        Example:
            >>> UserRole.parse("consultant")
            <UserRole.CONSULTANT: 'Consultant'>
            >>> UserRole.parse("owner") is None
            True
        """
        normalized = raw.strip().lower()
        for role in cls:
            if role.value.lower() == normalized:
                return role
        return None

    @property
    def slug(self) -> str:
        """Lowercase role name used in API responses."""
        return self.value.lower()
