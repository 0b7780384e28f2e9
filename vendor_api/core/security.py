"""Password hashing and signed access tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable

import bcrypt
import jwt

from vendor_api.core.config import settings

# ============================================================
# PASSWORD HASHING
# ============================================================

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:  # malformed stored hash
        return False

# ============================================================
# JWT
# ============================================================

class InvalidTokenError(Exception):
    """The token is malformed, badly signed or (for full validation) expired."""


@dataclass(frozen=True)
class Principal:
    """Identity carried by an access token."""

    user_id: str
    email: str | None = None
    roles: tuple[str, ...] = field(default_factory=tuple)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(role in self.roles for role in roles)


class TokenService:
    """Issues and reads HS256 access tokens: ``sub`` + ``email`` + ``roles`` + ``exp``."""

    def __init__(
        self,
        secret_key: str | None = None,
        algorithm: str | None = None,
        expire_minutes: int | None = None,
    ):
        self._secret_key = secret_key or settings.jwt_secret_key
        self._algorithm = algorithm or settings.jwt_algorithm
        self._lifetime = timedelta(
            minutes=expire_minutes if expire_minutes is not None else settings.access_token_expire_minutes
        )

    def generate_access_token(
        self,
        user_id: str,
        email: str | None,
        roles: Iterable[str],
        expires_delta: timedelta | None = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "roles": list(roles),
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self._lifetime),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> Principal:
        """Fully validate ``token`` (signature and expiry)."""
        return self._read(token, verify_exp=True)

    def get_principal_from_expired_token(self, token: str) -> Principal:
        """Validate the signature only; an expired token is still accepted.

        Used exclusively by the refresh flow.
        """
        return self._read(token, verify_exp=False)

    def _read(self, token: str, *, verify_exp: bool) -> Principal:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": verify_exp, "require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token") from exc

        roles = payload.get("roles") or []
        if isinstance(roles, str):
            roles = [roles]
        return Principal(
            user_id=str(payload["sub"]),
            email=payload.get("email"),
            roles=tuple(roles),
        )
