"""Bank account repository — reads join the owning vendor."""

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from vendor_api.domain.bank_account import BankAccount
from vendor_api.repositories.base import BaseRepository


class BankAccountRepository(BaseRepository[BankAccount]):
    model = BankAccount

    async def list_with_vendor(self) -> list[BankAccount]:
        result = await self._session.execute(
            select(BankAccount).options(joinedload(BankAccount.vendor)).order_by(BankAccount.id)
        )
        return list(result.scalars().all())

    async def get_with_vendor(self, bank_account_id: int) -> BankAccount | None:
        result = await self._session.execute(
            select(BankAccount)
            .options(joinedload(BankAccount.vendor))
            .where(BankAccount.id == bank_account_id)
        )
        return result.scalars().first()
