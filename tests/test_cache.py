from __future__ import annotations

import asyncio

import fakeredis

from vendor_api.core.cache import (
    ALL_VENDORS,
    CacheService,
    bank_account_key,
    contact_person_key,
    vendor_key,
)
from vendor_api.schemas.vendor import VendorOut, VendorWithChildren


def _vendor(vendor_id: int, name: str = "Acme") -> VendorOut:
    return VendorOut(id=vendor_id, name=name, address1="X", country="US", mail="a@b.com", phone="+15551234567")


def _run(coro_fn):
    async def runner():
        client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
        try:
            return await coro_fn(client)
        finally:
            await client.aclose()

    return asyncio.run(runner())


def test_key_formats():
    assert vendor_key(7) == "Vendor:7"
    assert bank_account_key(7) == "BankAccount:7"
    assert contact_person_key(7) == "ContactPerson_7"


def test_miss_returns_none():
    async def scenario(client):
        return await CacheService(client).get(vendor_key(1), VendorOut)

    assert _run(scenario) is None


def test_set_then_get_single_entry_with_ttl():
    async def scenario(client):
        cache = CacheService(client, default_ttl=600)
        await cache.set(vendor_key(1), _vendor(1))
        cached = await cache.get(vendor_key(1), VendorOut)
        ttl = await client.ttl(vendor_key(1))
        raw = await client.get(vendor_key(1))
        return cached, ttl, raw

    cached, ttl, raw = _run(scenario)

    assert cached == _vendor(1)
    assert 0 < ttl <= 600
    assert '"address1":"X"' in raw


def test_set_then_get_listing():
    async def scenario(client):
        cache = CacheService(client)
        await cache.set(ALL_VENDORS, [_vendor(1), _vendor(2, "Globex")])
        return await cache.get(ALL_VENDORS, list[VendorOut])

    assert [v.name for v in _run(scenario)] == ["Acme", "Globex"]


def test_nested_children_use_wire_names():
    async def scenario(client):
        cache = CacheService(client)
        value = VendorWithChildren(**_vendor(3).model_dump(), bank_accounts=[], contact_persons=[])
        await cache.set(vendor_key(3), value)
        return await client.get(vendor_key(3)), await cache.get(vendor_key(3), VendorWithChildren)

    raw, cached = _run(scenario)
    assert '"bankAccounts":[]' in raw
    assert cached.contact_persons == []


def test_remove_invalidates_every_given_key():
    async def scenario(client):
        cache = CacheService(client)
        await cache.set(vendor_key(1), _vendor(1))
        await cache.set(ALL_VENDORS, [_vendor(1)])
        await cache.remove(vendor_key(1), ALL_VENDORS, bank_account_key(99))
        await cache.remove()
        return await client.exists(vendor_key(1), ALL_VENDORS)

    assert _run(scenario) == 0
