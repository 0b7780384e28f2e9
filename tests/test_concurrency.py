from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import vendor_api.domain  # noqa: F401
from vendor_api.core.exceptions import ConcurrencyConflictError, NotFoundError
from vendor_api.db.base import Base, async_session_factory
from vendor_api.domain.bank_account import BankAccount
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.bank_account import BankAccountRepository
from vendor_api.repositories.base import SaveResult
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.services.common import ensure_saved


async def _nothing(session, vendor_id):
    pass


async def _rename(session, vendor_id):
    other = await session.get(Vendor, vendor_id)
    other.name = "Theirs"
    await session.commit()


async def _remove(session, vendor_id):
    await session.execute(delete(Vendor).where(Vendor.id == vendor_id))
    await session.commit()


async def _save_after(db_url, concurrent_write):
    engine = create_async_engine(db_url, poolclass=NullPool)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        async with sessions() as setup:
            vendor = Vendor(name="Acme", address1="X", country="US", mail="a@b.com", phone="+15551234567")
            setup.add(vendor)
            await setup.commit()
            vendor_id = vendor.id

        async with sessions() as mine, sessions() as theirs:
            repo = VendorRepository(mine)
            loaded = await repo.get_by_id(vendor_id)
            await concurrent_write(theirs, vendor_id)

            loaded.name = "Mine"
            result = await repo.save(vendor_id)
            # A failed save rolls back and expires the instance
            return result, (loaded.version if result is SaveResult.SAVED else None)
    finally:
        await engine.dispose()


@pytest.mark.parametrize(
    ("concurrent_write", "expected"),
    [
        (_nothing, SaveResult.SAVED),
        (_rename, SaveResult.CONFLICT),
        (_remove, SaveResult.MISSING),
    ],
)
def test_save_reports_optimistic_concurrency_outcome(tmp_path, concurrent_write, expected):
    result, _ = asyncio.run(_save_after(f"sqlite+aiosqlite:///{tmp_path / 'c.db'}", concurrent_write))
    assert result is expected


def test_successful_save_bumps_version(tmp_path):
    result, version = asyncio.run(_save_after(f"sqlite+aiosqlite:///{tmp_path / 'v.db'}", _nothing))
    assert result is SaveResult.SAVED
    assert version == 2


def test_ensure_saved_maps_outcomes_to_errors():
    ensure_saved(SaveResult.SAVED, "Vendor", 1)

    with pytest.raises(NotFoundError):
        ensure_saved(SaveResult.MISSING, "Vendor", 1)
    with pytest.raises(ConcurrencyConflictError) as info:
        ensure_saved(SaveResult.CONFLICT, "Vendor", 1)
    assert info.value.status_code == 500
    assert info.value.code == "CONCURRENCY_CONFLICT"


class _LosesVersionRace:
    """Delegates to the real repository; ``save`` reports a fixed outcome."""

    def __init__(self, repo, outcome):
        self._repo = repo
        self._outcome = outcome

    def __getattr__(self, name):
        return getattr(self._repo, name)

    async def save(self, entity_id):
        return self._outcome


@pytest.mark.parametrize(
    ("outcome", "status_code", "code"),
    [
        (SaveResult.CONFLICT, 500, "CONCURRENCY_CONFLICT"),
        (SaveResult.MISSING, 404, "NOT_FOUND"),
    ],
)
def test_vendor_update_surfaces_save_outcome(
    client, admin_headers, vendor_id, monkeypatch, outcome, status_code, code
):
    from vendor_api.services.vendor import VendorService

    original_init = VendorService.__init__

    def patched_init(self, session, cache):
        original_init(self, session, cache)
        self._repo = _LosesVersionRace(self._repo, outcome)

    monkeypatch.setattr(VendorService, "__init__", patched_init)

    body = {"id": vendor_id, "name": "Renamed", "address1": "X", "country": "US", "mail": "a@b.com", "phone": "+1"}
    response = client.put(f"/api/vendor/{vendor_id}", json=body, headers=admin_headers)

    assert response.status_code == status_code
    assert response.json()["error"]["code"] == code


def test_bank_account_deleted_during_update_is_404(client, admin_headers, vendor_id, monkeypatch):
    account = client.post(
        "/api/bankaccount",
        json={"iban": "DE89370400440532013000", "bic": "COBADEFFXXX", "name": "Main", "vendorId": vendor_id},
        headers=admin_headers,
    ).json()
    original_save = BankAccountRepository.save

    async def delete_then_save(self, entity_id):
        # Another request removes the row between load and commit
        async with async_session_factory() as other:
            await other.execute(delete(BankAccount).where(BankAccount.id == entity_id))
            await other.commit()
        return await original_save(self, entity_id)

    monkeypatch.setattr(BankAccountRepository, "save", delete_then_save)

    body = {**account, "name": "Renamed"}
    response = client.put(f"/api/bankaccount/{account['id']}", json=body, headers=admin_headers)

    assert response.status_code == 404
    assert client.get(f"/api/bankaccount/{account['id']}", headers=admin_headers).status_code == 404
