"""Integration tests for VerificationSessionManager over fakeredis.

Tests cover the record lifecycle: issue (overwrite, TTL), validate (match,
mismatch, absent, expired, malformed), consume (single use), and the invite
pointer that keeps one live invitation per email.
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from horizons.application.services import VerificationSessionManager
from horizons.core.result import Failure, Success
from horizons.domain.entities import (
    EmailChangeGrant,
    InviteGrant,
    PasswordResetGrant,
    SignatureLinkGrant,
    VerificationRecord,
)
from horizons.domain.enums import VerificationNamespace
from horizons.infrastructure.cache import RedisAdapter

PWD = VerificationNamespace.PASSWORD_RESET


async def expire_now(fake_redis, key: str) -> None:
    await fake_redis.pexpire(key, 1)
    await asyncio.sleep(0.01)


@pytest.mark.integration
class TestIssue:
    @pytest.mark.parametrize(
        ("record", "key", "ttl"),
        [
            (VerificationRecord.password_reset(email="jane@x.com", code="123456"), "pwdreset:jane@x.com", 900),
            (VerificationRecord.invite(email="jane@x.com", token="tok"), "invite:tok", 172_800),
            (
                VerificationRecord.email_change(user_id="u1", new_email="n@x.com", code="123456"),
                "emailchange:u1",
                900,
            ),
        ],
    )
    async def test_record_stored_under_key_with_ttl(self, sessions, fake_redis, record, key, ttl):
        result = await sessions.issue(record, ttl)

        assert result == Success(value=None)
        assert await fake_redis.exists(key) == 1
        assert ttl - 5 <= await fake_redis.ttl(key) <= ttl

    async def test_stored_email_change_value(self, sessions, fake_redis):
        record = VerificationRecord.email_change(user_id="u1", new_email="n@x.com", code="654321")

        await sessions.issue(record, 900)

        assert json.loads(await fake_redis.get("emailchange:u1")) == {
            "newEmail": "n@x.com",
            "code": "654321",
        }

    async def test_non_positive_ttl_is_rejected(self, sessions):
        record = VerificationRecord.password_reset(email="jane@x.com", code="123456")

        with pytest.raises(ValueError):
            await sessions.issue(record, 0)

    async def test_last_write_wins(self, sessions):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="111111"), 900)
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="222222"), 900)

        assert await sessions.validate(PWD, "jane@x.com", "111111") == Success(value=None)
        assert await sessions.validate(PWD, "jane@x.com", "222222") == Success(
            value=PasswordResetGrant(email="jane@x.com")
        )

    async def test_store_outage_is_failure(self, codec, logger):
        client = AsyncMock()
        client.ping.side_effect = RedisConnectionError("refused")
        adapter = RedisAdapter(redis_url="redis://localhost:6379/0")
        manager = VerificationSessionManager(cache=adapter, codec=codec, logger=logger)

        with patch.object(RedisAdapter, "_build_client", return_value=client):
            issued = await manager.issue(
                VerificationRecord.password_reset(email="jane@x.com", code="123456"), 900
            )
            validated = await manager.validate(PWD, "jane@x.com", "123456")

        assert isinstance(issued, Failure)
        assert isinstance(validated, Failure)


@pytest.mark.integration
class TestValidate:
    async def test_exact_match_returns_grant_without_consuming(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="042042"), 900)

        first = await sessions.validate(PWD, "jane@x.com", "042042")
        second = await sessions.validate(PWD, "jane@x.com", "042042")

        assert first == second == Success(value=PasswordResetGrant(email="jane@x.com"))
        assert await fake_redis.exists("pwdreset:jane@x.com") == 1

    @pytest.mark.parametrize("supplied", ["42042", "0420420", " 042042", "042043", ""])
    async def test_wrong_code_is_none_and_record_kept(self, sessions, fake_redis, supplied):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="042042"), 900)

        result = await sessions.validate(PWD, "jane@x.com", supplied)

        assert result == Success(value=None)
        assert await fake_redis.exists("pwdreset:jane@x.com") == 1

    async def test_token_comparison_is_case_sensitive(self, sessions):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="AbC"), 900)

        assert await sessions.validate(VerificationNamespace.INVITE, "abc", "abc") == Success(value=None)
        assert await sessions.validate(VerificationNamespace.INVITE, "AbC", "AbC") == Success(
            value=InviteGrant(email="jane@x.com")
        )

    async def test_never_issued_is_none(self, sessions):
        assert await sessions.validate(PWD, "ghost@x.com", "123456") == Success(value=None)

    async def test_expired_is_none(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="123456"), 900)
        await expire_now(fake_redis, "pwdreset:jane@x.com")

        assert await sessions.validate(PWD, "jane@x.com", "123456") == Success(value=None)

    async def test_short_ttl_expires(self, sessions):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="123456"), 1)

        assert await sessions.validate(PWD, "jane@x.com", "123456") == Success(
            value=PasswordResetGrant(email="jane@x.com")
        )
        await asyncio.sleep(1.1)
        assert await sessions.validate(PWD, "jane@x.com", "123456") == Success(value=None)

    async def test_signature_link_written_elsewhere_resolves(self, sessions, fake_redis):
        await fake_redis.set("signlink:tok", json.dumps({"userId": "u1", "craId": "cra-1"}), ex=600)

        result = await sessions.validate(VerificationNamespace.SIGNATURE_LINK, "tok", "tok")

        assert result == Success(value=SignatureLinkGrant(user_id="u1", cra_id="cra-1"))

    async def test_malformed_value_is_none(self, sessions, fake_redis, logger):
        await fake_redis.set("signlink:tok", json.dumps({"userId": "u1"}), ex=600)

        result = await sessions.validate(VerificationNamespace.SIGNATURE_LINK, "tok", "tok")

        assert result == Success(value=None)
        logger.warning.assert_called_once()

    async def test_email_change_code_checked_against_payload(self, sessions):
        record = VerificationRecord.email_change(user_id="u1", new_email="n@x.com", code="777777")
        await sessions.issue(record, 900)

        assert await sessions.validate(VerificationNamespace.EMAIL_CHANGE, "u1", "777777") == Success(
            value=EmailChangeGrant(user_id="u1", new_email="n@x.com")
        )
        assert await sessions.validate(VerificationNamespace.EMAIL_CHANGE, "u1", "777778") == Success(
            value=None
        )

    async def test_namespaces_do_not_collide(self, sessions):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="same"), 900)

        result = await sessions.validate(VerificationNamespace.SIGNATURE_LINK, "same", "same")

        assert result == Success(value=None)


@pytest.mark.integration
class TestConsume:
    async def test_consume_is_single_use(self, sessions):
        await sessions.issue(VerificationRecord.password_reset(email="jane@x.com", code="123456"), 900)

        assert await sessions.consume(PWD, "jane@x.com") == Success(value=True)
        assert await sessions.validate(PWD, "jane@x.com", "123456") == Success(value=None)
        assert await sessions.consume(PWD, "jane@x.com") == Success(value=False)

    async def test_consume_with_subject_clears_invite_pointer(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="tok"), 900)

        result = await sessions.consume(VerificationNamespace.INVITE, "tok", subject="jane@x.com")

        assert result == Success(value=True)
        assert await fake_redis.keys("invite:*") == []


@pytest.mark.integration
class TestInvitePointer:
    async def test_issue_points_email_at_token(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="tok"), 172_800)

        assert await fake_redis.get("invite:jane@x.com") == b"tok"
        assert 172_790 <= await fake_redis.ttl("invite:jane@x.com") <= 172_800

    async def test_reissue_revokes_previous_token(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="first"), 900)
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="second"), 900)

        assert await fake_redis.exists("invite:first") == 0
        assert await sessions.validate(VerificationNamespace.INVITE, "first", "first") == Success(
            value=None
        )
        assert await sessions.validate(VerificationNamespace.INVITE, "second", "second") == Success(
            value=InviteGrant(email="jane@x.com")
        )

    async def test_token_without_matching_pointer_is_none(self, sessions, fake_redis):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="current"), 900)
        await fake_redis.set("invite:stale", "jane@x.com", ex=900)

        result = await sessions.validate(VerificationNamespace.INVITE, "stale", "stale")

        assert result == Success(value=None)

    async def test_pointer_key_is_not_a_record(self, sessions):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="tok"), 900)

        result = await sessions.validate(VerificationNamespace.INVITE, "jane@x.com", "jane@x.com")

        assert result == Success(value=None)

    async def test_invites_for_different_emails_are_independent(self, sessions):
        await sessions.issue(VerificationRecord.invite(email="jane@x.com", token="jane-tok"), 900)
        await sessions.issue(VerificationRecord.invite(email="john@x.com", token="john-tok"), 900)

        assert await sessions.validate(
            VerificationNamespace.INVITE, "jane-tok", "jane-tok"
        ) == Success(value=InviteGrant(email="jane@x.com"))
        assert await sessions.validate(
            VerificationNamespace.INVITE, "john-tok", "john-tok"
        ) == Success(value=InviteGrant(email="john@x.com"))
