"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py          — Vendor (owns bank accounts and contact persons, cascade delete)
  bank_account.py    — BankAccount (IBAN/BIC)
  contact_person.py  — ContactPerson (normalized phone)
  user.py            — User, Role and the user_roles association
  mixins.py          — Shared TimestampMixin
"""

from vendor_api.domain.bank_account import BankAccount
from vendor_api.domain.contact_person import ContactPerson
from vendor_api.domain.user import ROLE_ADMIN, ROLE_MANAGER, Role, User
from vendor_api.domain.vendor import Vendor

__all__ = [
    "BankAccount",
    "ContactPerson",
    "ROLE_ADMIN",
    "ROLE_MANAGER",
    "Role",
    "User",
    "Vendor",
]
