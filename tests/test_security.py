"""Password hashing and JWT issue / verify."""

from datetime import timedelta

import pytest
from jose import jwt

from notehub.core.config import get_settings
from notehub.core.errors import ConfigurationError, InvalidToken
from notehub.core.security import (
    create_jwt,
    decode_jwt,
    ensure_signing_key,
    hash_password,
    verify_password,
)


def test_hash_is_salted_and_verifies():
    first = hash_password("hunter22")
    second = hash_password("hunter22")
    assert first != second
    assert verify_password("hunter22", first)
    assert verify_password("hunter22", second)
    assert not verify_password("hunter23", first)


def test_hash_uses_ten_rounds():
    assert hash_password("pw").startswith("$2b$10$")


@pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$10$short"])
def test_verify_malformed_hash_returns_false(bad_hash):
    assert verify_password("anything", bad_hash) is False


def test_jwt_round_trip():
    token = create_jwt(subject="user-1", role="Admin", tenant_id="tenant-1")
    claims = decode_jwt(token)
    assert claims.sub == "user-1"
    assert claims.role == "Admin"
    assert claims.tenant_id == "tenant-1"


def test_jwt_expires_after_24_hours():
    token = create_jwt(subject="u", role="Member", tenant_id="t")
    payload = jwt.get_unverified_claims(token)
    assert payload["exp"] - payload["iat"] == 24 * 3600


def test_expired_jwt_rejected():
    token = create_jwt("u", "Member", "t", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidToken):
        decode_jwt(token)


def test_tampered_jwt_rejected():
    token = create_jwt("u", "Member", "t")
    header, payload, signature = token.split(".")
    forged = jwt.encode({"sub": "u", "role": "Admin", "tenantId": "t"}, "other-secret")
    with pytest.raises(InvalidToken):
        decode_jwt(f"{header}.{forged.split('.')[1]}.{signature}")


def test_foreign_secret_rejected():
    token = jwt.encode({"sub": "u", "role": "Admin", "tenantId": "t"}, "not-our-secret")
    with pytest.raises(InvalidToken):
        decode_jwt(token)


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "Bearer x.y.z"])
def test_malformed_jwt_rejected(garbage):
    with pytest.raises(InvalidToken):
        decode_jwt(garbage)


def test_missing_claim_rejected():
    settings = get_settings()
    token = jwt.encode({"sub": "u"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    with pytest.raises(InvalidToken):
        decode_jwt(token)


def test_missing_secret_is_configuration_error(monkeypatch):
    monkeypatch.setattr(get_settings(), "jwt_secret", "")
    with pytest.raises(ConfigurationError):
        ensure_signing_key()
    with pytest.raises(ConfigurationError):
        create_jwt("u", "Member", "t")
