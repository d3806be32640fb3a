"""Unit tests for JWTService."""

from uuid import uuid4

import jwt
import pytest

from tracker.config import AuthSettings
from tracker.domain.service import JWTService
from tracker.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


class TestGetViewerId:
    """Tests for resolving the viewer from a cookie token."""

    def test_valid_token_resolves_user(self, jwt_service):
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), "leech")

        assert jwt_service.get_viewer_id(token) == user_id

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_missing_or_malformed_token_is_anonymous(self, jwt_service, token):
        assert jwt_service.get_viewer_id(token) is None

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(str(uuid4()), "leech")

        assert jwt_service.get_viewer_id(token) is None

    def test_expired_token_is_rejected(self, jwt_service):
        expired = JWTService(
            auth_settings=AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1)
        )
        token = expired.create_token(str(uuid4()), "leech")

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
        assert jwt_service.get_viewer_id(token) is None

    def test_non_uuid_subject_is_anonymous(self, jwt_service):
        token = jwt.encode(
            {"user_id": "42", "username": "leech", "exp": 9999999999},
            "test-secret",
            algorithm="HS256",
        )

        assert jwt_service.get_viewer_id(token) is None
