"""Shared router dependencies: cache, token service, current principal, role guard."""

from collections.abc import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from vendor_api.core.cache import CacheService
from vendor_api.core.exceptions import ForbiddenError, UnauthorizedError
from vendor_api.core.security import InvalidTokenError, Principal, TokenService

_bearer = HTTPBearer(auto_error=False)


def get_cache(request: Request) -> CacheService:
    return CacheService(request.app.state.redis)


def get_token_service() -> TokenService:
    return TokenService()


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    tokens: TokenService = Depends(get_token_service),
) -> Principal:
    """Dependency: require a valid, unexpired Bearer token."""
    if credentials is None:
        raise UnauthorizedError()
    try:
        return tokens.decode(credentials.credentials)
    except InvalidTokenError as exc:
        raise UnauthorizedError(str(exc)) from exc


def require_roles(*roles: str) -> Callable:
    """Dependency factory: the principal must hold at least one of ``roles``."""

    async def checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_any_role(roles):
            raise ForbiddenError(f"Requires one of the roles: {', '.join(roles)}")
        return principal

    return checker
