"""Bank account service — IBAN/BIC validated writes against an existing vendor."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core import cache as keys
from vendor_api.core.cache import CacheService
from vendor_api.core.exceptions import NotFoundError, ValidationError
from vendor_api.repositories.bank_account import BankAccountRepository
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.schemas.bank_account import BankAccountCreate, BankAccountOut, BankAccountUpdate
from vendor_api.schemas.vendor import BankAccountWithVendor
from vendor_api.services.common import VENDOR_MISSING_MESSAGE, ensure_ids_match, ensure_saved
from vendor_api.services.mapping import (
    apply_bank_account_update,
    bank_account_from_create,
    bank_account_to_out,
    bank_account_to_with_vendor,
)
from vendor_api.services.validators import bank_details_errors, normalize_iban

logger = logging.getLogger(__name__)

class BankAccountService:
    def __init__(self, session: AsyncSession, cache: CacheService):
        self._repo = BankAccountRepository(session)
        self._vendors = VendorRepository(session)
        self._cache = cache

    async def list_bank_accounts(self) -> list[BankAccountWithVendor]:
        cached = await self._cache.get(keys.ALL_BANK_ACCOUNTS, list[BankAccountWithVendor])
        if cached is not None:
            return cached

        accounts = [bank_account_to_with_vendor(a) for a in await self._repo.list_with_vendor()]
        await self._cache.set(keys.ALL_BANK_ACCOUNTS, accounts)
        return accounts

    async def get_bank_account(self, bank_account_id: int) -> BankAccountWithVendor:
        cache_key = keys.bank_account_key(bank_account_id)
        cached = await self._cache.get(cache_key, BankAccountWithVendor)
        if cached is not None:
            return cached

        account = await self._repo.get_with_vendor(bank_account_id)
        if account is None:
            raise NotFoundError("BankAccount", bank_account_id)

        dto = bank_account_to_with_vendor(account)
        await self._cache.set(cache_key, dto)
        return dto

    async def create_bank_account(self, data: BankAccountCreate) -> BankAccountOut:
        data = await self._validated(data)

        account = await self._repo.add(bank_account_from_create(data))
        await self._repo.commit()
        dto = bank_account_to_out(account)

        await self._cache.remove(
            keys.ALL_BANK_ACCOUNTS, keys.vendor_key(dto.vendor_id), keys.ALL_VENDORS
        )
        logger.info("Created bank account %s for vendor %s", dto.id, dto.vendor_id)
        return dto

    async def update_bank_account(self, bank_account_id: int, data: BankAccountUpdate) -> None:
        ensure_ids_match(bank_account_id, data.id)
        data = await self._validated(data)

        account = await self._repo.get_by_id(bank_account_id)
        if account is None:
            raise NotFoundError("BankAccount", bank_account_id)
        previous_vendor_id = account.vendor_id

        apply_bank_account_update(account, data)
        ensure_saved(await self._repo.save(bank_account_id), "BankAccount", bank_account_id)

        await self._cache.remove(
            keys.bank_account_key(bank_account_id),
            keys.ALL_BANK_ACCOUNTS,
            keys.vendor_key(previous_vendor_id),
            keys.vendor_key(data.vendor_id),
            keys.ALL_VENDORS,
        )
        logger.info("Updated bank account %s", bank_account_id)

    async def delete_bank_account(self, bank_account_id: int) -> None:
        account = await self._repo.get_by_id(bank_account_id)
        if account is None:
            raise NotFoundError("BankAccount", bank_account_id)
        vendor_id = account.vendor_id

        await self._repo.delete(account)
        await self._repo.commit()

        await self._cache.remove(
            keys.bank_account_key(bank_account_id),
            keys.ALL_BANK_ACCOUNTS,
            keys.vendor_key(vendor_id),
            keys.ALL_VENDORS,
        )
        logger.info("Deleted bank account %s", bank_account_id)

    async def _validated(self, data: BankAccountCreate) -> BankAccountCreate:
        """Check bank details and vendor; return a copy carrying the compact IBAN."""
        errors = bank_details_errors(data.iban, data.bic)
        if errors:
            raise ValidationError("Invalid bank details", errors)
        if not await self._vendors.exists(data.vendor_id):
            raise ValidationError(VENDOR_MISSING_MESSAGE, {"vendorId": VENDOR_MISSING_MESSAGE})
        return data.model_copy(update={"iban": normalize_iban(data.iban)})
