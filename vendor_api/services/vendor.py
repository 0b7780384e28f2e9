"""Vendor service — read-through cached reads, validated writes, cache invalidation.

Queries go through the repositories; nothing here knows about HTTP.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core import cache as keys
from vendor_api.core.cache import CacheService
from vendor_api.core.exceptions import NotFoundError, ValidationError
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.schemas.vendor import VendorCreate, VendorUpdate, VendorWithChildren
from vendor_api.services.common import ensure_ids_match, ensure_saved
from vendor_api.services.mapping import (
    apply_vendor_update,
    vendor_from_create,
    vendor_to_with_children,
)
from vendor_api.services.validators import (
    bank_details_errors,
    normalize_iban,
    normalize_phone_number,
    phone_errors,
)

logger = logging.getLogger(__name__)

class VendorService:
    def __init__(self, session: AsyncSession, cache: CacheService):
        self._repo = VendorRepository(session)
        self._cache = cache

    async def list_vendors(self) -> list[VendorWithChildren]:
        cached = await self._cache.get(keys.ALL_VENDORS, list[VendorWithChildren])
        if cached is not None:
            return cached

        vendors = [vendor_to_with_children(v) for v in await self._repo.list_with_children()]
        await self._cache.set(keys.ALL_VENDORS, vendors)
        return vendors

    async def get_vendor(self, vendor_id: int) -> VendorWithChildren:
        cache_key = keys.vendor_key(vendor_id)
        cached = await self._cache.get(cache_key, VendorWithChildren)
        if cached is not None:
            return cached

        vendor = await self._repo.get_with_children(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor", vendor_id)

        dto = vendor_to_with_children(vendor)
        await self._cache.set(cache_key, dto)
        return dto

    async def create_vendor(self, data: VendorCreate) -> VendorWithChildren:
        errors: dict[str, str] = {}
        for i, account in enumerate(data.bank_accounts):
            errors.update(bank_details_errors(account.iban, account.bic, prefix=f"bankAccounts[{i}]."))
        for i, person in enumerate(data.contact_persons):
            errors.update(phone_errors(person.phone, field=f"contactPersons[{i}].phone"))
        if errors:
            raise ValidationError("Vendor validation failed", errors)

        data = data.model_copy(
            update={
                "bank_accounts": [
                    a.model_copy(update={"iban": normalize_iban(a.iban)}) for a in data.bank_accounts
                ],
                "contact_persons": [
                    p.model_copy(update={"phone": normalize_phone_number(p.phone)})
                    for p in data.contact_persons
                ],
            }
        )
        vendor = await self._repo.add(vendor_from_create(data))
        await self._repo.commit()

        created = await self._repo.get_with_children(vendor.id)
        dto = vendor_to_with_children(created)

        await self._cache.remove(keys.ALL_VENDORS, keys.ALL_BANK_ACCOUNTS, keys.ALL_CONTACT_PERSONS)
        logger.info("Created vendor %s (%s)", dto.id, dto.name)
        return dto

    async def update_vendor(self, vendor_id: int, data: VendorUpdate) -> None:
        ensure_ids_match(vendor_id, data.id)

        vendor = await self._repo.get_with_children(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor", vendor_id)
        stale_keys = _vendor_cache_keys(vendor)

        apply_vendor_update(vendor, data)
        ensure_saved(await self._repo.save(vendor_id), "Vendor", vendor_id)

        await self._cache.remove(*stale_keys)
        logger.info("Updated vendor %s", vendor_id)

    async def delete_vendor(self, vendor_id: int) -> None:
        vendor = await self._repo.get_with_children(vendor_id)
        if vendor is None:
            raise NotFoundError("Vendor", vendor_id)
        stale_keys = _vendor_cache_keys(vendor)

        # Children go with it (ORM cascade + ON DELETE CASCADE)
        await self._repo.delete(vendor)
        await self._repo.commit()

        await self._cache.remove(*stale_keys)
        logger.info("Deleted vendor %s", vendor_id)


def _vendor_cache_keys(vendor: Vendor) -> list[str]:
    """Every key whose snapshot embeds this vendor."""
    return [
        keys.vendor_key(vendor.id),
        keys.ALL_VENDORS,
        keys.ALL_BANK_ACCOUNTS,
        keys.ALL_CONTACT_PERSONS,
        *(keys.bank_account_key(ba.id) for ba in vendor.bank_accounts),
        *(keys.contact_person_key(cp.id) for cp in vendor.contact_persons),
    ]
