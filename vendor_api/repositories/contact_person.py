"""Contact person repository — reads join the owning vendor."""

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from vendor_api.domain.contact_person import ContactPerson
from vendor_api.repositories.base import BaseRepository


class ContactPersonRepository(BaseRepository[ContactPerson]):
    model = ContactPerson

    async def list_with_vendor(self) -> list[ContactPerson]:
        result = await self._session.execute(
            select(ContactPerson)
            .options(joinedload(ContactPerson.vendor))
            .order_by(ContactPerson.id)
        )
        return list(result.scalars().all())

    async def get_with_vendor(self, contact_person_id: int) -> ContactPerson | None:
        result = await self._session.execute(
            select(ContactPerson)
            .options(joinedload(ContactPerson.vendor))
            .where(ContactPerson.id == contact_person_id)
        )
        return result.scalars().first()
