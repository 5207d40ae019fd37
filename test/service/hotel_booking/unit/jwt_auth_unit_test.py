from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.platform.exception.exceptions import AuthenticationError
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@pytest.mark.unit
class TestJwtAuth:
    @pytest.fixture
    def jwt_auth(self) -> JwtAuth:
        return JwtAuth()

    def test_token_round_trips_user_id(self, jwt_auth: JwtAuth) -> None:
        token = jwt_auth.create_jwt_token(user_id=7)

        assert jwt_auth.get_current_user_id_from_jwt(token) == 7

    def test_missing_token(self, jwt_auth: JwtAuth) -> None:
        with pytest.raises(AuthenticationError, match='Not authenticated'):
            jwt_auth.get_current_user_id_from_jwt(None)

    def test_token_signed_with_other_secret(self, jwt_auth: JwtAuth) -> None:
        token = jwt.encode({'user_id': 7}, 'another-secret', algorithm=jwt_auth.algorithm)

        with pytest.raises(AuthenticationError, match='Invalid token'):
            jwt_auth.get_current_user_id_from_jwt(token)

    def test_expired_token(self, jwt_auth: JwtAuth) -> None:
        expired = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = jwt.encode(
            {'user_id': 7, 'exp': expired}, jwt_auth.secret, algorithm=jwt_auth.algorithm
        )

        with pytest.raises(AuthenticationError):
            jwt_auth.get_current_user_id_from_jwt(token)

    @pytest.mark.parametrize('user_id', [None, 'abc', 0, True])
    def test_payload_without_valid_user_id(self, jwt_auth: JwtAuth, user_id: object) -> None:
        token = jwt.encode({'user_id': user_id}, jwt_auth.secret, algorithm=jwt_auth.algorithm)

        with pytest.raises(AuthenticationError, match='Invalid token'):
            jwt_auth.get_current_user_id_from_jwt(token)
