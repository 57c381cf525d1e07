"""Account-side entities returned by the authentication provider and profile store."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthAccount:
    """Identity held by the authentication provider.

    Attributes:
        user_id: Provider user id (also the profile primary key).
        email: Login email.
        email_confirmed: Whether the provider considers the email verified.
    """

    user_id: str
    email: str
    email_confirmed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthSession:
    """Session issued after a successful sign-in."""

    access_token: str
    refresh_token: str
    expires_in: int | None = None
    token_type: str = "bearer"


@dataclass(frozen=True, slots=True, kw_only=True)
class Profile:
    """Row of the ``profiles`` table.

    Only the columns the verification flows read are typed; the full row is
    kept in ``extra`` so responses can echo it.
    """

    id: str
    email: str
    name: str | None = None
    role: str | None = None
    active: bool = True
    client_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Profile":
        known = {"id", "email", "name", "role", "active", "client_id"}
        return cls(
            id=str(row["id"]),
            email=str(row.get("email") or ""),
            name=row.get("name"),
            role=row.get("role"),
            active=bool(row.get("active", True)),
            client_id=row.get("client_id"),
            extra={k: v for k, v in row.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        """Flatten back to a row, role lowercased as the API exposes it."""
        return {
            **self.extra,
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.lower() if self.role else self.role,
            "active": self.active,
            "client_id": self.client_id,
        }
