"""Unit tests for ResolveSignatureLinkHandler."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from horizons.application.errors import ApplicationErrorCode
from horizons.application.queries import ResolveSignatureLink
from horizons.application.queries.handlers import (
    ResolveSignatureLinkHandler,
    SignatureLinkTarget,
)
from horizons.core.enums import ErrorCode
from horizons.core.result import Failure, Success
from horizons.domain.entities import SignatureLinkGrant
from horizons.domain.enums import VerificationNamespace
from horizons.infrastructure.errors import CacheError


@pytest.fixture
def sessions():
    return AsyncMock()


@pytest.fixture
def handler(sessions):
    return ResolveSignatureLinkHandler(sessions=sessions, logger=MagicMock())


@pytest.mark.unit
class TestResolveSignatureLinkHandler:
    async def test_valid_link_resolves_without_consuming(self, handler, sessions):
        sessions.validate.return_value = Success(
            value=SignatureLinkGrant(user_id="u1", cra_id="cra-1")
        )

        result = await handler.handle(ResolveSignatureLink(token="tok"))

        assert result == Success(value=SignatureLinkTarget(user_id="u1", cra_id="cra-1"))
        sessions.validate.assert_awaited_once_with(
            VerificationNamespace.SIGNATURE_LINK, "tok", "tok"
        )
        sessions.consume.assert_not_called()

    @pytest.mark.parametrize("token", [None, "", "   "])
    async def test_blank_token_is_validation_error(self, handler, sessions, token):
        result = await handler.handle(ResolveSignatureLink(token=token))

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == "Token required"
        assert result.error.domain_error.code is ErrorCode.TOKEN_REQUIRED
        sessions.validate.assert_not_called()

    async def test_unknown_link_is_invalid(self, handler, sessions):
        sessions.validate.return_value = Success(value=None)

        result = await handler.handle(ResolveSignatureLink(token="gone"))

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.VERIFICATION_FAILED
        assert result.error.message == "Invalid or expired signature link."

    async def test_store_outage_is_not_reported_as_invalid(self, handler, sessions):
        sessions.validate.return_value = Failure(
            error=CacheError(code=ErrorCode.CACHE_UNAVAILABLE, message="down")
        )

        result = await handler.handle(ResolveSignatureLink(token="tok"))

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.SERVICE_UNAVAILABLE
