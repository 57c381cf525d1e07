"""Unit tests for VerificationRecord and its grants."""

import pytest

from horizons.domain.entities import (
    EmailChangeGrant,
    InviteGrant,
    PasswordResetGrant,
    SignatureLinkGrant,
    VerificationRecord,
)
from horizons.domain.enums import VerificationNamespace


@pytest.mark.unit
class TestVerificationRecordFactories:
    def test_password_reset_is_keyed_by_email(self):
        record = VerificationRecord.password_reset(email="jane@x.com", code="123456")

        assert record.namespace is VerificationNamespace.PASSWORD_RESET
        assert record.lookup_key == "jane@x.com"
        assert record.secret == "123456"
        assert record.grant == PasswordResetGrant(email="jane@x.com")

    def test_invite_is_keyed_by_its_token(self):
        record = VerificationRecord.invite(email="jane@x.com", token="tok")

        assert record.lookup_key == record.secret == "tok"
        assert record.grant == InviteGrant(email="jane@x.com")

    def test_email_change_is_keyed_by_user_id(self):
        record = VerificationRecord.email_change(user_id="u1", new_email="new@x.com", code="000042")

        assert record.lookup_key == "u1"
        assert record.grant == EmailChangeGrant(user_id="u1", new_email="new@x.com")

    def test_signature_link_is_keyed_by_its_token(self):
        record = VerificationRecord.signature_link(user_id="u1", cra_id="cra9", token="tok")

        assert record.lookup_key == "tok"
        assert record.grant == SignatureLinkGrant(user_id="u1", cra_id="cra9")


@pytest.mark.unit
class TestVerificationRecordInvariants:
    def test_grant_must_match_namespace(self):
        with pytest.raises(ValueError, match="PasswordResetGrant"):
            VerificationRecord(
                namespace=VerificationNamespace.PASSWORD_RESET,
                lookup_key="jane@x.com",
                secret="123456",
                grant=InviteGrant(email="jane@x.com"),
            )

    def test_link_records_must_be_addressed_by_secret(self):
        with pytest.raises(ValueError, match="addressed by their secret"):
            VerificationRecord(
                namespace=VerificationNamespace.INVITE,
                lookup_key="other",
                secret="tok",
                grant=InviteGrant(email="jane@x.com"),
            )

    def test_records_are_immutable(self):
        record = VerificationRecord.password_reset(email="jane@x.com", code="123456")

        with pytest.raises(AttributeError):
            record.secret = "654321"  # type: ignore[misc]


@pytest.mark.unit
def test_namespace_tags_match_stored_key_prefixes():
    assert [ns.value for ns in VerificationNamespace] == [
        "pwdreset",
        "invite",
        "emailchange",
        "signlink",
    ]
    assert VerificationNamespace.INVITE.keyed_by_secret
    assert VerificationNamespace.SIGNATURE_LINK.keyed_by_secret
    assert not VerificationNamespace.PASSWORD_RESET.keyed_by_secret
    assert not VerificationNamespace.EMAIL_CHANGE.keyed_by_secret
    assert VerificationNamespace.INVITE.tracks_current_secret
    assert not VerificationNamespace.SIGNATURE_LINK.tracks_current_secret


@pytest.mark.unit
@pytest.mark.parametrize(
    ("record", "subject"),
    [
        (VerificationRecord.password_reset(email="jane@x.com", code="123456"), "jane@x.com"),
        (VerificationRecord.invite(email="jane@x.com", token="tok"), "jane@x.com"),
        (VerificationRecord.email_change(user_id="u1", new_email="n@x.com", code="1"), "u1"),
        (VerificationRecord.signature_link(user_id="u1", cra_id="c1", token="tok"), "u1"),
    ],
)
def test_record_subject(record, subject):
    assert record.subject == subject
