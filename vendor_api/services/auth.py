"""Login and token refresh."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.exceptions import UnauthorizedError, ValidationError
from vendor_api.core.security import InvalidTokenError, TokenService, verify_password
from vendor_api.repositories.user import UserRepository

logger = logging.getLogger(__name__)

_INVALID_REQUEST = "Invalid client request"

class AuthService:
    def __init__(self, session: AsyncSession, tokens: TokenService):
        self._users = UserRepository(session)
        self._tokens = tokens

    async def login(self, email: str, password: str) -> str:
        """Return a fresh access token; unknown email and wrong password look the same."""
        user = await self._users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise UnauthorizedError("Invalid email or password")

        return self._tokens.generate_access_token(user.id, user.email, user.role_names)

    async def refresh(self, access_token: str) -> str:
        """Re-issue a token (with the user's current roles) from a possibly expired one."""
        try:
            principal = self._tokens.get_principal_from_expired_token(access_token)
        except InvalidTokenError as exc:
            raise ValidationError(_INVALID_REQUEST, {"accessToken": str(exc)}) from exc

        user = await self._users.get_by_id(principal.user_id)
        if user is None:
            raise ValidationError(_INVALID_REQUEST, {"accessToken": "Unknown user"})

        return self._tokens.generate_access_token(user.id, user.email, user.role_names)
