"""Tests for JWTCodec."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from common.auth import JWTCodec


SECRET = "codec-secret"


def test_sign_binds_subject():
    codec = JWTCodec(secret=SECRET)

    claims = codec.verify(codec.sign("user-1"))

    assert claims["sub"] == "user-1"
    assert "exp" not in claims


def test_tokens_for_same_subject_are_unique():
    codec = JWTCodec(secret=SECRET)

    assert codec.sign("user-1") != codec.sign("user-1")


def test_expiry_claim_when_configured():
    codec = JWTCodec(secret=SECRET, expire_minutes=30)

    claims = codec.verify(codec.sign("user-1"))

    assert claims["exp"] > claims["iat"]


def test_expired_token_is_rejected():
    codec = JWTCodec(secret=SECRET, expire_minutes=30)
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode({"sub": "user-1", "iat": past, "exp": past}, SECRET, algorithm="HS256")

    with pytest.raises(ValueError):
        codec.verify(token)


def test_wrong_secret_is_rejected():
    token = JWTCodec(secret="another-secret").sign("user-1")

    with pytest.raises(ValueError):
        JWTCodec(secret=SECRET).verify(token)


def test_token_without_subject_is_rejected():
    token = jwt.encode({"role": "guest"}, SECRET, algorithm="HS256")

    with pytest.raises(ValueError):
        JWTCodec(secret=SECRET).verify(token)


def test_empty_secret_not_allowed():
    with pytest.raises(ValueError):
        JWTCodec(secret="")
