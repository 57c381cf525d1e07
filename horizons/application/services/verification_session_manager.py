"""Verification session manager.

Issues, validates and consumes verification records in the key-value store.
This is the only component that touches verification keys; flows talk to it
in terms of namespaces, lookup keys and secrets.

Lifecycle of a record:

    Absent --issue--> Issued --consume--> Absent
                        |
                        +--TTL elapses--> Absent

Issuing over an existing record replaces it and restarts its TTL, which
invalidates the previously sent secret (last write wins). A failed
validation does not change the record.

Invites are keyed by their token, so a re-invite writes a new key instead of
overwriting. For them a subject pointer ``invite:{email}`` holds the current
token: issuing moves the pointer and deletes the superseded token, and
validation only accepts the token the pointer names. Emails always contain
``@`` and URL-safe tokens never do, so the two kinds of key cannot collide.
"""

import hmac

from horizons.core.errors import DomainError
from horizons.core.result import Failure, Result, Success
from horizons.domain.entities import VerificationGrant, VerificationRecord
from horizons.domain.enums import VerificationNamespace
from horizons.domain.protocols import CacheProtocol, LoggerProtocol, TokenCodecProtocol


def _secrets_match(expected: str, supplied: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


class VerificationSessionManager:
    """Record lifecycle over CacheProtocol.

    Store failures are returned as Failure and never folded into "invalid":
    an unreachable store must surface as a retryable error, not as a wrong
    code.
    """

    def __init__(
        self,
        *,
        cache: CacheProtocol,
        codec: TokenCodecProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._codec = codec
        self._logger = logger

    async def issue(
        self, record: VerificationRecord, ttl_seconds: int
    ) -> Result[None, DomainError]:
        """Store ``record`` under its key with a time-to-live.

        Raises:
            ValueError: If ``ttl_seconds`` is not positive.
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        key = self._codec.build_key(record.namespace, record.lookup_key)
        match await self._cache.set(key, self._codec.encode(record), ttl=ttl_seconds):
            case Failure(error=error):
                self._logger.error(
                    "verification_issue_failed", error=error, namespace=record.namespace.value
                )
                return Failure(error=error)
            case Success():
                pass

        if record.namespace.tracks_current_secret:
            match await self._move_pointer(record, ttl_seconds):
                case Failure(error=error):
                    return Failure(error=error)
                case Success():
                    pass

        self._logger.debug(
            "verification_issued", namespace=record.namespace.value, ttl=ttl_seconds
        )
        return Success(value=None)

    async def _move_pointer(
        self, record: VerificationRecord, ttl_seconds: int
    ) -> Result[None, DomainError]:
        """Point the subject at ``record`` and revoke the secret it replaces."""
        pointer_key = self._codec.build_key(record.namespace, record.subject)
        match await self._cache.get(pointer_key):
            case Failure(error=error):
                self._logger.error(
                    "verification_pointer_read_failed",
                    error=error,
                    namespace=record.namespace.value,
                )
                return Failure(error=error)
            case Success(value=previous):
                pass

        match await self._cache.set(pointer_key, record.secret, ttl=ttl_seconds):
            case Failure(error=error):
                self._logger.error(
                    "verification_pointer_write_failed",
                    error=error,
                    namespace=record.namespace.value,
                )
                return Failure(error=error)
            case Success():
                pass

        if previous and previous != record.secret:
            previous_key = self._codec.build_key(record.namespace, previous)
            match await self._cache.delete(previous_key):
                case Failure(error=error):
                    # Pointer already moved; the old secret no longer validates
                    self._logger.warning(
                        "verification_revoke_failed",
                        namespace=record.namespace.value,
                        error_message=error.message,
                    )
                case Success():
                    self._logger.info(
                        "verification_superseded", namespace=record.namespace.value
                    )
        return Success(value=None)

    async def validate(
        self,
        namespace: VerificationNamespace,
        lookup_key: str,
        supplied_secret: str,
    ) -> Result[VerificationGrant | None, DomainError]:
        """Check a supplied secret against the stored record.

        Returns:
            Success(grant) on an exact match, Success(None) when the record is
            absent, expired, malformed or the secret differs (the reasons are
            not distinguished), Failure when the store is unreachable.
        """
        if not lookup_key or not supplied_secret:
            return Success(value=None)

        key = self._codec.build_key(namespace, lookup_key)
        match await self._cache.get(key):
            case Failure(error=error):
                self._logger.error(
                    "verification_lookup_failed", error=error, namespace=namespace.value
                )
                return Failure(error=error)
            case Success(value=None):
                return Success(value=None)
            case Success(value=raw):
                pass

        record = self._codec.decode(namespace, lookup_key, raw)
        if record is None:
            self._logger.warning("verification_record_malformed", namespace=namespace.value)
            return Success(value=None)

        if not _secrets_match(record.secret, supplied_secret):
            return Success(value=None)

        if namespace.tracks_current_secret:
            pointer_key = self._codec.build_key(namespace, record.subject)
            match await self._cache.get(pointer_key):
                case Failure(error=error):
                    self._logger.error(
                        "verification_lookup_failed", error=error, namespace=namespace.value
                    )
                    return Failure(error=error)
                case Success(value=current):
                    pass
            if current is None or not _secrets_match(current, supplied_secret):
                self._logger.info("verification_secret_superseded", namespace=namespace.value)
                return Success(value=None)

        return Success(value=record.grant)

    async def consume(
        self,
        namespace: VerificationNamespace,
        lookup_key: str,
        *,
        subject: str | None = None,
    ) -> Result[bool, DomainError]:
        """Delete a record.

        Args:
            subject: For namespaces with a subject pointer, the subject whose
                pointer is cleared once the record itself is gone.

        Returns:
            Success(True) if a record was removed, Success(False) if none existed.
        """
        key = self._codec.build_key(namespace, lookup_key)
        match await self._cache.delete(key):
            case Failure(error=error):
                self._logger.error(
                    "verification_consume_failed", error=error, namespace=namespace.value
                )
                return Failure(error=error)
            case Success(value=deleted):
                pass

        if subject and namespace.tracks_current_secret:
            match await self._cache.delete(self._codec.build_key(namespace, subject)):
                case Failure(error=error):
                    # Record is gone, a dangling pointer only names a dead token
                    self._logger.warning(
                        "verification_pointer_not_cleared",
                        namespace=namespace.value,
                        error_message=error.message,
                    )
                case Success():
                    pass

        self._logger.debug("verification_consumed", namespace=namespace.value, deleted=deleted)
        return Success(value=deleted)
