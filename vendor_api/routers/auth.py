"""Anonymous login and token refresh endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.security import TokenService
from vendor_api.db.base import get_db
from vendor_api.routers.deps import get_token_service
from vendor_api.schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    RefreshTokenResponse,
)
from vendor_api.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=AccessTokenResponse)
async def login(
    body: LoginRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Exchange email + password for an access token. 401 on bad credentials."""
    token = await AuthService(session, tokens).login(body.email, body.password)
    return AccessTokenResponse(access_token=token)


@router.post("/refresh-token", response_model=RefreshTokenResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Re-issue a token from a (possibly expired) one. 400 when the user is gone."""
    token = await AuthService(session, tokens).refresh(body.access_token)
    return RefreshTokenResponse(new_access_token=token)
