"""Unit tests for application error classification."""

import pytest

from horizons.application.errors import (
    ApplicationErrorCode,
    from_domain_error,
    validation_failed,
    verification_failed,
)
from horizons.core.enums import ErrorCode
from horizons.core.errors import ConflictError, DomainError, ValidationError
from horizons.domain.enums import VerificationNamespace
from horizons.domain.errors import AuthProviderError, EmailDeliveryError, ProfileStoreError
from horizons.infrastructure.enums import InfrastructureErrorCode
from horizons.infrastructure.errors import CacheError


@pytest.mark.unit
class TestFromDomainError:
    @pytest.mark.parametrize(
        "error",
        [
            CacheError(
                code=ErrorCode.CACHE_UNAVAILABLE,
                message="Failed to connect to Redis",
                infrastructure_code=InfrastructureErrorCode.CACHE_CONNECTION_ERROR,
            ),
            AuthProviderError(
                code=ErrorCode.AUTH_PROVIDER_UNAVAILABLE, message="timeout", is_transient=True
            ),
            ProfileStoreError(
                code=ErrorCode.PROFILE_STORE_UNAVAILABLE, message="timeout", is_transient=True
            ),
        ],
    )
    def test_outages_are_service_unavailable(self, error):
        app_error = from_domain_error(error)

        assert app_error.code is ApplicationErrorCode.SERVICE_UNAVAILABLE
        assert app_error.domain_error is error
        # Upstream text is not echoed to clients
        assert app_error.message != error.message

    @pytest.mark.parametrize(
        "error",
        [
            AuthProviderError(code=ErrorCode.AUTH_PROVIDER_REJECTED, message="bad request"),
            ProfileStoreError(code=ErrorCode.PROFILE_STORE_REJECTED, message="constraint"),
            EmailDeliveryError(code=ErrorCode.EMAIL_DELIVERY_FAILED, message="rejected"),
        ],
    )
    def test_rejections_are_external_service_errors(self, error):
        assert from_domain_error(error).code is ApplicationErrorCode.EXTERNAL_SERVICE_ERROR

    def test_conflict(self):
        error = ConflictError(
            code=ErrorCode.EMAIL_UNCHANGED,
            message="New email is identical to the current one.",
            resource_type="Profile",
        )

        app_error = from_domain_error(error)

        assert app_error.code is ApplicationErrorCode.CONFLICT
        assert app_error.message == "New email is identical to the current one."

    def test_unknown_domain_error_is_execution_failure(self):
        error = DomainError(code=ErrorCode.VALIDATION_FAILED, message="odd")

        assert from_domain_error(error).code is ApplicationErrorCode.COMMAND_EXECUTION_FAILED


@pytest.mark.unit
class TestConstructors:
    def test_validation_failed_carries_field(self):
        error = validation_failed("Token required", field="token", code=ErrorCode.TOKEN_REQUIRED)

        assert error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert isinstance(error.domain_error, ValidationError)
        assert error.domain_error.field == "token"
        assert error.domain_error.code is ErrorCode.TOKEN_REQUIRED

    @pytest.mark.parametrize(
        ("namespace", "message"),
        [
            (VerificationNamespace.PASSWORD_RESET, "Invalid or expired reset code."),
            (VerificationNamespace.INVITE, "Invalid or expired invitation link."),
            (VerificationNamespace.EMAIL_CHANGE, "Invalid or expired verification code."),
            (VerificationNamespace.SIGNATURE_LINK, "Invalid or expired signature link."),
        ],
    )
    def test_one_message_per_flow(self, namespace, message):
        error = verification_failed(namespace)

        assert error.code is ApplicationErrorCode.VERIFICATION_FAILED
        assert error.message == message
