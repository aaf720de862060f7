"""Tests for the authentication feature.
Covers: AuthService, JWT utilities, login endpoint, bearer-token dependency.
"""

from datetime import timedelta

import jwt
import pytest
from fastapi import status

from src.config.settings import settings
from src.features.auth.jwt_utils import create_access_token, decode_token, verify_token_type
from src.features.auth.service import AuthService


class TestJwtUtils:
    """Tests for token creation and decoding."""

    def test_access_token_round_trip(self):
        token = create_access_token({"sub": "65a1f0c2e4b0a1b2c3d4e5f6"})
        payload = decode_token(token)

        assert payload["sub"] == "65a1f0c2e4b0a1b2c3d4e5f6"
        assert verify_token_type(payload, "access")
        assert not verify_token_type(payload, "refresh")

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "x"}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(jwt.ExpiredSignatureError):
            decode_token(token)


class TestAuthService:
    """Tests for AuthService.authenticate_user()"""

    async def test_authenticate_success(self, session, make_user):
        user = await make_user(email="member@example.com", password="Member@123")

        assert await AuthService.authenticate_user(session, "member@example.com", "Member@123") is user

    async def test_authenticate_wrong_password(self, session, make_user):
        await make_user(email="member@example.com", password="Member@123")

        assert await AuthService.authenticate_user(session, "member@example.com", "Wrong@123") is None

    async def test_authenticate_unknown_email(self, session):
        assert await AuthService.authenticate_user(session, "ghost@example.com", "Ghost@123") is None


class TestLoginEndpoint:
    """Tests for POST /api/auth/login"""

    async def test_login_success_and_use_token(self, client, make_user):
        user = await make_user(email="member@example.com", password="Member@123")

        response = await client.post(
            "/api/auth/login", json={"email": " MEMBER@example.com ", "password": "Member@123"}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == settings.access_token_expire_minutes * 60

        me = await client.get("/api/users/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["id"] == user.id

    async def test_login_wrong_password(self, client, make_user):
        await make_user(email="member@example.com", password="Member@123")

        response = await client.post("/api/auth/login", json={"email": "member@example.com", "password": "nope"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"

    async def test_login_does_not_recheck_password_strength(self, client, make_user):
        await make_user(email="legacy@example.com", password="weak")

        response = await client.post("/api/auth/login", json={"email": "legacy@example.com", "password": "weak"})

        assert response.status_code == status.HTTP_200_OK

    async def test_login_blank_password(self, client):
        response = await client.post("/api/auth/login", json={"email": "member@example.com", "password": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "password"

    async def test_login_invalid_email(self, client):
        response = await client.post("/api/auth/login", json={"email": "not-an-email", "password": "Member@123"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "detail": "not-an-email is an invalid email",
            "field": "email",
            "rule": "format",
        }


class TestBearerDependency:
    """Tests for get_current_user() through a protected endpoint."""

    async def test_garbage_token(self, client):
        response = await client.get("/api/users/me", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_token_for_deleted_user(self, client):
        token = create_access_token({"sub": "65a1f0c2e4b0a1b2c3d4e5f6"})

        response = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "User not found"

    async def test_expired_token(self, client, make_user):
        user = await make_user()
        token = create_access_token({"sub": user.id}, expires_delta=timedelta(minutes=-5))

        response = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
