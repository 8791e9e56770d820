"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from forum.config import AuthSettings
from forum.domain.error import InvalidCredentialError, UnauthenticatedError
from forum.domain.service import JWTService
from forum.domain.value import UserId
from forum.util.jwt import TokenType, create_token


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123")


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings)


class TestVerifyToken:
    """Tests for verify_token."""

    def test_access_token_round_trip(self, jwt_service):
        user_id = UserId(uuid4())

        token = jwt_service.create_access_token(user_id)

        assert jwt_service.verify_token(token) == user_id

    def test_refresh_token_accepted_as_refresh(self, jwt_service):
        user_id = UserId(uuid4())

        token = jwt_service.create_refresh_token(user_id)

        assert jwt_service.verify_token(token, TokenType.REFRESH) == user_id

    def test_refresh_token_rejected_as_access(self, jwt_service):
        token = jwt_service.create_refresh_token(UserId(uuid4()))

        with pytest.raises(InvalidCredentialError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_expired_token_rejected(self, jwt_service, auth_settings):
        token = create_token(
            str(uuid4()), TokenType.ACCESS, timedelta(seconds=-5), auth_settings
        )

        with pytest.raises(InvalidCredentialError):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_rejected(self, jwt_service):
        other = JWTService(
            AuthSettings(jwt_secret="another-secret-0123456789abcdef01234567")
        )
        token = other.create_access_token(UserId(uuid4()))

        with pytest.raises(InvalidCredentialError):
            jwt_service.verify_token(token)

    def test_garbage_rejected(self, jwt_service):
        with pytest.raises(InvalidCredentialError):
            jwt_service.verify_token("not-a-jwt")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, jwt_service, token):
        with pytest.raises(UnauthenticatedError, match="No token provided"):
            jwt_service.authenticate(token)

    def test_valid_token(self, jwt_service):
        user_id = UserId(uuid4())

        assert jwt_service.authenticate(jwt_service.create_access_token(user_id)) == user_id
