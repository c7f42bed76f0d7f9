"""
Tests for token issuing and identity extraction
"""
from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from notes_app.config import settings
from notes_app.services.auth import create_access_token, decode_identity, require_auth


def test_token_round_trip():
    token = create_access_token("user_42")

    assert decode_identity(token) == "user_42"


def test_token_signed_with_other_secret():
    token = jwt.encode({"sub": "user_42"}, "not-the-secret", algorithm=settings.jwt_algorithm)

    assert decode_identity(token) is None


def test_token_without_subject():
    token = jwt.encode({"name": "nobody"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    assert decode_identity(token) is None


def test_expired_token():
    token = create_access_token("user_42", expires_delta=timedelta(seconds=-1))

    assert decode_identity(token) is None


@pytest.mark.asyncio
async def test_require_auth_without_credentials():
    with pytest.raises(HTTPException) as exc_info:
        await require_auth(None)

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_require_auth_returns_identity():
    credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials=create_access_token("u1"))

    assert await require_auth(credentials) == "u1"
