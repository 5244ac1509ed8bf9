"""Test token helpers and the bearer-token dependency."""

from datetime import timedelta

import pytest
from jose import JWTError, jwt

from spacetime.auth import create_access_token, decode_access_token
from spacetime.config import settings


class TestTokenUtilities:
    """Test JWT creation and decoding."""

    def test_create_and_decode_token(self):
        """Test the subject and timestamps survive a round trip."""
        token = create_access_token("usr_test123456")
        payload = decode_access_token(token)

        assert payload["sub"] == "usr_test123456"
        assert "exp" in payload
        assert "iat" in payload

    def test_extra_claims_included(self):
        """Test additional claims are carried in the payload."""
        token = create_access_token("usr_abc", name="Ada", avatarUrl="http://a/b.png")
        payload = decode_access_token(token)

        assert payload["name"] == "Ada"
        assert payload["avatarUrl"] == "http://a/b.png"

    def test_expired_token_rejected(self):
        """Test decoding an expired token fails."""
        token = create_access_token("usr_abc", expires_delta=timedelta(seconds=-10))
        with pytest.raises(JWTError):
            decode_access_token(token)


class TestBearerDependency:
    """Test authentication on the memories routes."""

    def test_missing_token(self, client):
        """Test requests without a token get 401 and a Bearer challenge."""
        response = client.get("/memories")
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_valid_token(self, client, auth_headers):
        """Test a valid token passes."""
        assert client.get("/memories", headers=auth_headers).status_code == 200

    def test_wrong_secret_rejected(self, client):
        """Test tokens signed with another key are refused."""
        token = jwt.encode({"sub": "usr_abc"}, "not-the-secret", algorithm=settings.ALGORITHM)
        response = client.get("/memories", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_expired_token_rejected(self, client):
        """Test an expired token is refused."""
        token = create_access_token("usr_abc", expires_delta=timedelta(minutes=-1))
        response = client.get("/memories", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_without_subject_rejected(self, client):
        """Test a token lacking the sub claim is refused."""
        token = jwt.encode({"name": "nobody"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
        response = client.get("/memories", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_garbage_token_rejected(self, client):
        """Test a malformed token is refused."""
        response = client.get("/memories", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_open_mode_needs_no_token(self, client, open_mode):
        """Test routes are open when auth is disabled."""
        assert client.get("/memories").status_code == 200
