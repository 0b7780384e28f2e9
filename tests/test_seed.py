from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import vendor_api.domain  # noqa: F401
from vendor_api.core.config import settings
from vendor_api.core.security import verify_password
from vendor_api.db.base import Base
from vendor_api.repositories.user import RoleRepository, UserRepository
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.services.seed import initialize_database
from vendor_api.services.validators import validate_bic, validate_iban


async def _seed_twice(db_url):
    engine = create_async_engine(db_url, poolclass=NullPool)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        for _ in range(2):
            async with sessions() as session:
                await initialize_database(session)

        async with sessions() as session:
            return (
                await RoleRepository(session).list(),
                await UserRepository(session).list(),
                await VendorRepository(session).list_with_children(),
                await VendorRepository(session).count(),
            )
    finally:
        await engine.dispose()


def test_initializer_is_idempotent_and_seeds_demo_data(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", True)

    roles, users, vendors, vendor_count = asyncio.run(_seed_twice(f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"))

    assert sorted(r.name for r in roles) == ["Admin", "Manager"]
    assert {u.email: u.role_names for u in users} == {
        settings.admin_email: ["Admin"],
        settings.manager_email: ["Manager"],
    }
    admin = next(u for u in users if u.email == settings.admin_email)
    assert verify_password(settings.admin_password, admin.password_hash)

    assert [v.name for v in vendors] == ["Acme Corporation", "Widget World", "Gadget Galaxy"]
    assert vendor_count == 3
    galaxy = vendors[2]
    assert all(validate_iban(a.iban).is_valid and validate_bic(a.bic).is_valid for a in galaxy.bank_accounts)
    assert all(" " not in p.phone for p in galaxy.contact_persons)
    assert all(" " not in a.iban for a in galaxy.bank_accounts)
