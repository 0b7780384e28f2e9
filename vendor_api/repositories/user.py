"""User and role repositories."""

from sqlalchemy import func, select

from vendor_api.domain.user import Role, User
from vendor_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        # Emails are matched case-insensitively, like normalized login names
        result = await self._session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalars().first()

    async def list(self) -> list[User]:
        result = await self._session.execute(select(User).order_by(User.email))
        return list(result.scalars().all())


class RoleRepository(BaseRepository[Role]):
    model = Role

    async def get_by_name(self, name: str) -> Role | None:
        result = await self._session.execute(
            select(Role).where(func.lower(Role.name) == name.lower())
        )
        return result.scalars().first()

    async def create(self, name: str) -> Role:
        return await self.add(Role(name=name))
