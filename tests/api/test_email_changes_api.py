"""API tests for email change endpoints (bearer)."""

import pytest
from fastapi.testclient import TestClient

from horizons.application.errors import from_domain_error, verification_failed
from horizons.core.container import (
    get_complete_email_change_handler,
    get_request_email_change_handler,
)
from horizons.core.enums import ErrorCode
from horizons.core.errors import ConflictError
from horizons.core.result import Failure, Success
from horizons.domain.entities import Profile
from horizons.domain.enums import VerificationNamespace
from horizons.main import app
from horizons.presentation.routers.api.middleware import CurrentUser, get_current_user


class StubHandler:
    def __init__(self, result):
        self.result = result
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return self.result


@pytest.fixture(autouse=True)
def authenticated():
    app.dependency_overrides[get_current_user] = lambda: CurrentUser(
        user_id="u1", email="old@x.com", role="Consultant"
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def override(dependency, result) -> StubHandler:
    handler = StubHandler(result)
    app.dependency_overrides[dependency] = lambda: handler
    return handler


@pytest.mark.api
class TestCreateEmailChangeCode:
    def test_returns_202(self, client):
        handler = override(get_request_email_change_handler, Success(value=None))

        response = client.post("/api/v1/email-change-codes", json={"new_email": "New@X.com"})

        assert response.status_code == 202
        assert handler.commands[0].user_id == "u1"
        assert handler.commands[0].new_email == "new@x.com"

    def test_unchanged_email_is_409(self, client):
        override(
            get_request_email_change_handler,
            Failure(
                error=from_domain_error(
                    ConflictError(
                        code=ErrorCode.EMAIL_UNCHANGED,
                        message="New email is identical to the current one.",
                        resource_type="Profile",
                    )
                )
            ),
        )

        response = client.post("/api/v1/email-change-codes", json={"new_email": "old@x.com"})

        assert response.status_code == 409
        assert response.json()["detail"] == "New email is identical to the current one."


@pytest.mark.api
class TestCreateEmailChange:
    def test_returns_updated_profile(self, client):
        override(
            get_complete_email_change_handler,
            Success(
                value=Profile(
                    id="u1", email="new@x.com", role="Consultant", extra={"phone": "123"}
                )
            ),
        )

        response = client.post("/api/v1/email-changes", json={"code": "123456"})

        assert response.status_code == 200
        body = response.json()
        assert body["email"] == "new@x.com"
        assert body["role"] == "consultant"
        assert body["phone"] == "123"

    def test_wrong_code_is_400(self, client):
        override(
            get_complete_email_change_handler,
            Failure(error=verification_failed(VerificationNamespace.EMAIL_CHANGE)),
        )

        response = client.post("/api/v1/email-changes", json={"code": "000000"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid or expired verification code."
