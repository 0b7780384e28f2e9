"""Database initializer: roles, the two built-in accounts, and demo vendors.

Idempotent — every step checks before it inserts.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.config import settings
from vendor_api.core.security import hash_password
from vendor_api.domain.bank_account import BankAccount
from vendor_api.domain.contact_person import ContactPerson
from vendor_api.domain.user import ROLE_ADMIN, ROLE_MANAGER, User
from vendor_api.domain.vendor import Vendor
from vendor_api.repositories.user import RoleRepository, UserRepository
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.services.validators import normalize_iban, normalize_phone_number

logger = logging.getLogger(__name__)


def _demo_vendors() -> list[Vendor]:
    return [
        Vendor(
            name="Acme Corporation",
            name2="Acme Corp",
            address1="123 Main Street",
            address2="Suite 456",
            zip="12345",
            country="United States",
            city="Anytown",
            mail="info@acmecorp.com",
            phone="+1 (555) 123-4567",
            notes="Preferred supplier for widgets",
        ),
        Vendor(
            name="Widget World",
            name2="Widget World Inc",
            address1="456 Elm Street",
            address2="Unit 789",
            zip="54321",
            country="United States",
            city="Springfield",
            mail="info@widgets.com",
            phone="+1 (555) 987-6543",
            notes="Specializes in custom widgets",
        ),
        Vendor(
            name="Gadget Galaxy",
            name2="Gadget Galaxy LLC",
            address1="789 Oak Street",
            address2="Apt 123",
            zip="67890",
            country="United States",
            city="Metroville",
            mail="info@galaxy.com",
            phone="+1 (555) 456-7890",
            notes="Innovative gadgets for all ages",
            bank_accounts=[
                BankAccount(
                    iban=normalize_iban("DE89 3704 0044 0532 0130 00"),
                    bic="COBADEFFXXX",
                    name="TS Hauptkonto",
                ),
            ],
            contact_persons=[
                ContactPerson(
                    first_name="Hans",
                    last_name="Mueller",
                    phone=normalize_phone_number("+49 30 2345678"),
                    mail="hans.mueller@techsolutions.de",
                ),
                ContactPerson(
                    first_name="Lena",
                    last_name="Schmidt",
                    phone=normalize_phone_number("+49 30 3456789"),
                    mail="lena.schmidt@techsolutions.de",
                ),
            ],
        ),
    ]


async def initialize_database(session: AsyncSession) -> None:
    roles = RoleRepository(session)
    users = UserRepository(session)

    role_by_name = {}
    for name in (ROLE_ADMIN, ROLE_MANAGER):
        role = await roles.get_by_name(name)
        if role is None:
            role = await roles.create(name)
            logger.info("Seeded role %s", name)
        role_by_name[name] = role

    for email, password, role_name in (
        (settings.admin_email, settings.admin_password, ROLE_ADMIN),
        (settings.manager_email, settings.manager_password, ROLE_MANAGER),
    ):
        if await users.get_by_email(email) is None:
            await users.add(
                User(email=email, password_hash=hash_password(password), roles=[role_by_name[role_name]])
            )
            logger.info("Seeded %s user %s", role_name, email)

    if settings.seed_demo_data:
        vendors = VendorRepository(session)
        if not await vendors.count():
            for vendor in _demo_vendors():
                await vendors.add(vendor)
            logger.info("Seeded demo vendors")

    await session.commit()
