"""Unit tests for JWTService."""

from uuid import uuid4

import jwt
import pytest

from gatehouse.config import AuthSettings
from gatehouse.domain.service import JWTService
from gatehouse.util.jwt import JWTError


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret", jwt_expiry_days=1)


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings=auth_settings)


class TestJWTService:
    """Tests for JWTService."""

    def test_get_actor_for_admin(self, jwt_service):
        user_id = str(uuid4())
        token = jwt_service.create_token(user_id, "Alice", is_admin=True)

        actor = jwt_service.get_actor(token)

        assert str(actor.user_id) == user_id
        assert actor.is_admin is True

    def test_get_actor_for_member(self, jwt_service):
        token = jwt_service.create_token(str(uuid4()), None, is_admin=False)

        assert jwt_service.get_actor(token).is_admin is False

    def test_token_with_wrong_secret_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-secret"))
        token = other.create_token(str(uuid4()), "Mallory", is_admin=True)

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.get_actor(token)

    def test_expired_token_rejected(self, jwt_service, auth_settings):
        token = jwt.encode(
            {"user_id": str(uuid4()), "is_admin": True, "exp": 0},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.get_actor(token)

    def test_malformed_user_id_rejected(self, jwt_service):
        token = jwt_service.create_token("not-a-uuid", "Bob", is_admin=True)

        with pytest.raises(JWTError):
            jwt_service.get_actor(token)

    def test_garbage_token_rejected(self, jwt_service):
        with pytest.raises(JWTError):
            jwt_service.get_actor("not.a.token")
