"""User management service (Admin only at the HTTP layer)."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.exceptions import NotFoundError, ValidationError
from vendor_api.core.security import hash_password
from vendor_api.domain.user import User
from vendor_api.repositories.user import RoleRepository, UserRepository
from vendor_api.schemas.user import UserCreate, UserOut
from vendor_api.services.mapping import user_to_out
from vendor_api.services.validators import password_policy_errors

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)
        self._roles = RoleRepository(session)

    async def list_users(self) -> list[UserOut]:
        return [user_to_out(u) for u in await self._repo.list()]

    async def get_user(self, user_id: str) -> UserOut:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user_to_out(user)

    async def create_user(self, data: UserCreate) -> UserOut:
        if await self._repo.get_by_email(data.email):
            raise ValidationError(
                "User could not be created",
                {"email": f"Email '{data.email}' is already taken."},
            )

        policy_errors = password_policy_errors(data.password)
        if policy_errors:
            raise ValidationError("User could not be created", {"password": " ".join(policy_errors)})

        roles = []
        if data.role:
            role = await self._roles.get_by_name(data.role)
            if role is None:
                message = f"Role '{data.role}' does not exist."
                raise ValidationError(message, {"role": message})
            roles.append(role)

        user = await self._repo.add(
            User(email=data.email, password_hash=hash_password(data.password), roles=roles)
        )
        await self._repo.commit()
        logger.info("Created user %s with roles %s", user.email, user.role_names)
        return user_to_out(user)

    async def delete_user(self, user_id: str) -> None:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        await self._repo.delete(user)
        await self._repo.commit()
        logger.info("Deleted user %s", user.email)
