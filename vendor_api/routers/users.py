"""User management router (Admin only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.db.base import get_db
from vendor_api.domain.user import ROLE_ADMIN
from vendor_api.routers.deps import require_roles
from vendor_api.schemas.user import UserCreate, UserOut
from vendor_api.services.user import UserService

router = APIRouter(
    prefix="/user",
    tags=["Users"],
    dependencies=[Depends(require_roles(ROLE_ADMIN))],
)


@router.get("", response_model=list[UserOut])
async def list_users(session: AsyncSession = Depends(get_db)):
    return await UserService(session).list_users()


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, session: AsyncSession = Depends(get_db)):
    return await UserService(session).get_user(user_id)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Create a login user, optionally assigning an existing role."""
    user = await UserService(session).create_user(body)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, session: AsyncSession = Depends(get_db)):
    await UserService(session).delete_user(user_id)
