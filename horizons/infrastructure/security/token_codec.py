"""Verification token codec.

Generates verification secrets and defines how each namespace's record is
stored in Redis.

Token Strategy:
    - Opaque tokens (invite, signature link): ``secrets.token_urlsafe(32)``,
      256 bits of entropy, safe inside a query string.
    - Numeric codes (password reset, email change): 6 decimal digits drawn
      uniformly with ``secrets.randbelow``, zero-padded.

Stored values (shared with the CRA subsystem, do not change):
    pwdreset:{email}       -> "123456"
    invite:{token}         -> "jane@example.com"
    invite:{email}         -> current invite token
    emailchange:{user_id}  -> {"newEmail": "...", "code": "123456"}
    signlink:{token}       -> {"userId": "...", "craId": "..."}
"""

import json
import secrets

from horizons.core.constants import NUMERIC_CODE_LENGTH, OPAQUE_TOKEN_BYTES
from horizons.domain.entities import (
    EmailChangeGrant,
    InviteGrant,
    SignatureLinkGrant,
    VerificationRecord,
)
from horizons.domain.enums import VerificationNamespace
from horizons.infrastructure.cache.cache_keys import CacheKeys


class TokenCodec:
    """Implements TokenCodecProtocol.

    Usage:
        codec = TokenCodec()
        record = VerificationRecord.password_reset(
            email="jane@example.com", code=codec.new_numeric_code()
        )
        await cache.set(codec.build_key(record.namespace, record.lookup_key), codec.encode(record), ttl=900)
    """

    def __init__(
        self,
        *,
        token_bytes: int = OPAQUE_TOKEN_BYTES,
        code_length: int = NUMERIC_CODE_LENGTH,
        keys: CacheKeys | None = None,
    ) -> None:
        self._token_bytes = token_bytes
        self._code_length = code_length
        self._keys = keys or CacheKeys()

    def new_opaque_token(self) -> str:
        """Generate an unguessable URL-safe token.

        Example:
            >>> token = TokenCodec().new_opaque_token()
            >>> len(token) >= 43
            True
        """
        return secrets.token_urlsafe(self._token_bytes)

    def new_numeric_code(self) -> str:
        """Generate a fixed-width decimal code.

        Example:
            >>> code = TokenCodec().new_numeric_code()
            >>> len(code), code.isdigit()
            (6, True)
        """
        return str(secrets.randbelow(10**self._code_length)).zfill(self._code_length)

    def build_key(self, namespace: VerificationNamespace, discriminator: str) -> str:
        return self._keys.verification(namespace, discriminator)

    def encode(self, record: VerificationRecord) -> str:
        """Serialize the stored value of a record."""
        match record.grant:
            case InviteGrant(email=email):
                return email
            case EmailChangeGrant(new_email=new_email):
                return json.dumps({"newEmail": new_email, "code": record.secret})
            case SignatureLinkGrant(user_id=user_id, cra_id=cra_id):
                return json.dumps({"userId": user_id, "craId": cra_id})
            case _:
                # PasswordResetGrant: the code is the whole value
                return record.secret

    def decode(
        self, namespace: VerificationNamespace, lookup_key: str, raw: str
    ) -> VerificationRecord | None:
        """Rebuild a record from its stored value.

        Returns:
            The record, or None when the value is malformed or misses a
            required field. Callers treat None exactly like a missing key.
        """
        match namespace:
            case VerificationNamespace.PASSWORD_RESET:
                if not raw:
                    return None
                return VerificationRecord.password_reset(email=lookup_key, code=raw)
            case VerificationNamespace.INVITE:
                # "invite:{email}" is the current-token pointer, not a record
                if not raw or "@" in lookup_key:
                    return None
                return VerificationRecord.invite(email=raw, token=lookup_key)
            case VerificationNamespace.EMAIL_CHANGE:
                data = _load_object(raw)
                new_email = data.get("newEmail")
                code = data.get("code")
                if not new_email or not code:
                    return None
                return VerificationRecord.email_change(
                    user_id=lookup_key, new_email=str(new_email), code=str(code)
                )
            case VerificationNamespace.SIGNATURE_LINK:
                data = _load_object(raw)
                user_id = data.get("userId")
                cra_id = data.get("craId")
                if not user_id or not cra_id:
                    return None
                return VerificationRecord.signature_link(
                    user_id=str(user_id), cra_id=str(cra_id), token=lookup_key
                )


def _load_object(raw: str) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}
