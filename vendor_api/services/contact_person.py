"""Contact person service — phone validated and normalized before it is stored."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core import cache as keys
from vendor_api.core.cache import CacheService
from vendor_api.core.exceptions import NotFoundError, ValidationError
from vendor_api.repositories.contact_person import ContactPersonRepository
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.schemas.contact_person import (
    ContactPersonCreate,
    ContactPersonOut,
    ContactPersonUpdate,
)
from vendor_api.schemas.vendor import ContactPersonWithVendor
from vendor_api.services.common import VENDOR_MISSING_MESSAGE, ensure_ids_match, ensure_saved
from vendor_api.services.mapping import (
    apply_contact_person_update,
    contact_person_from_create,
    contact_person_to_out,
    contact_person_to_with_vendor,
)
from vendor_api.services.validators import normalize_phone_number, phone_errors

logger = logging.getLogger(__name__)

class ContactPersonService:
    def __init__(self, session: AsyncSession, cache: CacheService):
        self._repo = ContactPersonRepository(session)
        self._vendors = VendorRepository(session)
        self._cache = cache

    async def list_contact_persons(self) -> list[ContactPersonWithVendor]:
        cached = await self._cache.get(keys.ALL_CONTACT_PERSONS, list[ContactPersonWithVendor])
        if cached is not None:
            return cached

        persons = [contact_person_to_with_vendor(p) for p in await self._repo.list_with_vendor()]
        await self._cache.set(keys.ALL_CONTACT_PERSONS, persons)
        return persons

    async def get_contact_person(self, contact_person_id: int) -> ContactPersonWithVendor:
        cache_key = keys.contact_person_key(contact_person_id)
        cached = await self._cache.get(cache_key, ContactPersonWithVendor)
        if cached is not None:
            return cached

        person = await self._repo.get_with_vendor(contact_person_id)
        if person is None:
            raise NotFoundError("ContactPerson", contact_person_id)

        dto = contact_person_to_with_vendor(person)
        await self._cache.set(cache_key, dto)
        return dto

    async def create_contact_person(self, data: ContactPersonCreate) -> ContactPersonOut:
        data = await self._validated(data)

        person = await self._repo.add(contact_person_from_create(data))
        await self._repo.commit()
        dto = contact_person_to_out(person)

        await self._cache.remove(
            keys.ALL_CONTACT_PERSONS, keys.vendor_key(dto.vendor_id), keys.ALL_VENDORS
        )
        logger.info("Created contact person %s for vendor %s", dto.id, dto.vendor_id)
        return dto

    async def update_contact_person(self, contact_person_id: int, data: ContactPersonUpdate) -> None:
        ensure_ids_match(contact_person_id, data.id)
        data = await self._validated(data)

        person = await self._repo.get_by_id(contact_person_id)
        if person is None:
            raise NotFoundError("ContactPerson", contact_person_id)
        previous_vendor_id = person.vendor_id

        apply_contact_person_update(person, data)
        ensure_saved(await self._repo.save(contact_person_id), "ContactPerson", contact_person_id)

        await self._cache.remove(
            keys.contact_person_key(contact_person_id),
            keys.ALL_CONTACT_PERSONS,
            keys.vendor_key(previous_vendor_id),
            keys.vendor_key(data.vendor_id),
            keys.ALL_VENDORS,
        )
        logger.info("Updated contact person %s", contact_person_id)

    async def delete_contact_person(self, contact_person_id: int) -> None:
        person = await self._repo.get_by_id(contact_person_id)
        if person is None:
            raise NotFoundError("ContactPerson", contact_person_id)
        vendor_id = person.vendor_id

        await self._repo.delete(person)
        await self._repo.commit()

        await self._cache.remove(
            keys.contact_person_key(contact_person_id),
            keys.ALL_CONTACT_PERSONS,
            keys.vendor_key(vendor_id),
            keys.ALL_VENDORS,
        )
        logger.info("Deleted contact person %s", contact_person_id)

    async def _validated(self, data: ContactPersonCreate) -> ContactPersonCreate:
        """Check phone and vendor; return a copy carrying the normalized phone."""
        errors = phone_errors(data.phone)
        if errors:
            raise ValidationError("Invalid phone number", errors)
        if not await self._vendors.exists(data.vendor_id):
            raise ValidationError(VENDOR_MISSING_MESSAGE, {"vendorId": VENDOR_MISSING_MESSAGE})
        return data.model_copy(update={"phone": normalize_phone_number(data.phone)})
