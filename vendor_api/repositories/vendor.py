"""Vendor repository — vendor queries eager-load both child collections."""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    def _with_children(self):
        return select(Vendor).options(
            selectinload(Vendor.bank_accounts),
            selectinload(Vendor.contact_persons),
        )

    async def list_with_children(self) -> list[Vendor]:
        result = await self._session.execute(self._with_children().order_by(Vendor.id))
        return list(result.scalars().all())

    async def get_with_children(self, vendor_id: int) -> Vendor | None:
        result = await self._session.execute(
            self._with_children()
            .where(Vendor.id == vendor_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()
