"""Redis read-through cache for read-model snapshots.

Values are the JSON form of the response schemas, so a cache hit can be
returned to the client as-is. Keys are fixed strings per entity / listing.
There is no locking and no single-flight: concurrent misses each query the
store and each repopulate the key, and a read racing a write may serve the
pre-write snapshot until the writer's ``remove`` lands.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, TypeAdapter
from redis.asyncio import Redis

from vendor_api.core.config import settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

ALL_VENDORS = "AllVendors"
ALL_BANK_ACCOUNTS = "AllBankAccounts"
ALL_CONTACT_PERSONS = "AllContactPersons"


def vendor_key(vendor_id: int) -> str:
    return f"Vendor:{vendor_id}"


def bank_account_key(bank_account_id: int) -> str:
    return f"BankAccount:{bank_account_id}"


def contact_person_key(contact_person_id: int) -> str:
    return f"ContactPerson_{contact_person_id}"


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class CacheService:
    """Thin typed wrapper over an async redis client."""

    def __init__(self, client: Redis, default_ttl: int | None = None):
        self._client = client
        self._default_ttl = default_ttl if default_ttl is not None else settings.cache_ttl_seconds

    async def get(self, key: str, type_: Any) -> Any | None:
        """Return the cached value validated as ``type_``, or None on a miss."""
        raw = await self._client.get(key)
        if raw is None:
            logger.debug("cache miss %s", key)
            return None
        logger.debug("cache hit %s", key)
        return TypeAdapter(type_).validate_json(raw)

    async def set(self, key: str, value: BaseModel | list[BaseModel], ttl: int | None = None) -> None:
        if isinstance(value, BaseModel):
            payload = value.model_dump_json(by_alias=True)
        else:
            payload = "[" + ",".join(item.model_dump_json(by_alias=True) for item in value) + "]"
        await self._client.set(key, payload, ex=ttl if ttl is not None else self._default_ttl)

    async def remove(self, *keys: str) -> None:
        if keys:
            await self._client.delete(*keys)
            logger.debug("cache invalidated %s", ", ".join(keys))
