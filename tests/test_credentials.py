"""Tests for password hashing and bearer tokens."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from app.config import Settings
from app.services.auth import TokenClaims
from app.services.auth.credentials import CredentialService

service = CredentialService(Settings(jwt_secret="unit-test-secret", bcrypt_rounds=4))
claims = TokenClaims(id="3f0c2f8e-8f5e-4a55-9e0e-6f3f4b8c2a11", email="a@example.com", role="CLIENT")


def test_password_round_trip():
    password_hash = service.hash_password("hunter22")

    assert password_hash != "hunter22"
    assert service.verify_password("hunter22", password_hash) is True
    assert service.verify_password("hunter23", password_hash) is False


def test_verify_password_with_garbage_hash_is_false():
    assert service.verify_password("hunter22", "not-a-hash") is False


def test_token_carries_claims():
    token = service.issue_token(claims)

    assert service.verify_token(token) == claims


def test_token_expires_after_seven_days():
    token = service.issue_token(claims)

    payload = jwt.get_unverified_claims(token)
    expires = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    assert timedelta(days=6, hours=23) < expires - datetime.now(timezone.utc) <= timedelta(days=7)


def test_token_signed_with_other_secret_is_rejected():
    other = CredentialService(Settings(jwt_secret="another-secret", bcrypt_rounds=4))

    assert service.verify_token(other.issue_token(claims)) is None


def test_expired_token_is_rejected():
    token = jwt.encode(
        {
            "id": claims.id,
            "email": claims.email,
            "role": claims.role,
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        "unit-test-secret",
        algorithm="HS256",
    )

    assert service.verify_token(token) is None


def test_token_with_unknown_role_is_rejected():
    token = jwt.encode({"id": claims.id, "email": claims.email, "role": "ROOT"}, "unit-test-secret", algorithm="HS256")

    assert service.verify_token(token) is None


def test_admin_flag():
    assert TokenClaims(id="1", email="b@example.com", role="ADMIN").is_admin is True
    assert claims.is_admin is False
