from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from vendor_api.core.security import (
    InvalidTokenError,
    Principal,
    TokenService,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-0123456789abcdefghij"


def test_password_hash_roundtrip():
    hashed = hash_password("Admin123!")

    assert hashed != "Admin123!"
    assert verify_password("Admin123!", hashed)
    assert not verify_password("admin123!", hashed)


def test_verify_password_rejects_malformed_hash():
    assert not verify_password("Admin123!", "not-a-bcrypt-hash")


def test_token_carries_subject_email_and_roles():
    tokens = TokenService(secret_key=SECRET)
    token = tokens.generate_access_token("user-1", "a@b.com", ["Admin", "Manager"])

    principal = tokens.decode(token)

    assert principal == Principal(user_id="user-1", email="a@b.com", roles=("Admin", "Manager"))
    assert principal.has_any_role(["Manager"])
    assert not principal.has_any_role(["Auditor"])

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert {"sub", "email", "roles", "iat", "exp"} <= set(claims)


def test_expired_token_fails_full_validation_but_still_yields_principal():
    tokens = TokenService(secret_key=SECRET)
    token = tokens.generate_access_token("user-1", "a@b.com", ["Manager"], expires_delta=timedelta(minutes=-5))

    with pytest.raises(InvalidTokenError, match="expired"):
        tokens.decode(token)

    principal = tokens.get_principal_from_expired_token(token)
    assert principal.user_id == "user-1"
    assert principal.roles == ("Manager",)


def test_token_signed_with_other_key_is_rejected():
    token = TokenService(secret_key="another-secret-0123456789abcdefghij").generate_access_token(
        "user-1", None, []
    )
    tokens = TokenService(secret_key=SECRET)

    with pytest.raises(InvalidTokenError):
        tokens.decode(token)
    with pytest.raises(InvalidTokenError):
        tokens.get_principal_from_expired_token(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError, match="Invalid token"):
        TokenService(secret_key=SECRET).get_principal_from_expired_token(token)
