"""Explicit conversions between ORM rows and wire schemas.

One function per shape; related rows must already be loaded by the
repository query that produced the entity.
"""

from vendor_api.domain.bank_account import BankAccount
from vendor_api.domain.contact_person import ContactPerson
from vendor_api.domain.user import User
from vendor_api.domain.vendor import Vendor
from vendor_api.schemas.bank_account import BankAccountCreate, BankAccountNested, BankAccountOut
from vendor_api.schemas.contact_person import (
    ContactPersonCreate,
    ContactPersonNested,
    ContactPersonOut,
)
from vendor_api.schemas.user import UserOut
from vendor_api.schemas.vendor import (
    BankAccountWithVendor,
    ContactPersonWithVendor,
    VendorCreate,
    VendorFields,
    VendorOut,
    VendorWithChildren,
)

# ------------------------------------------------------------------
# Vendor
# ------------------------------------------------------------------

def _vendor_values(data) -> dict:
    # Works for both the ORM row and any VendorFields schema
    return {
        "name": data.name,
        "name2": data.name2,
        "address1": data.address1,
        "address2": data.address2,
        "zip": data.zip,
        "country": data.country,
        "city": data.city,
        "mail": data.mail,
        "phone": data.phone,
        "notes": data.notes,
    }

def vendor_from_create(data: VendorCreate) -> Vendor:
    """Build a new vendor with its inline children (phones must already be normalized)."""
    return Vendor(
        **_vendor_values(data),
        bank_accounts=[bank_account_from_nested(ba) for ba in data.bank_accounts],
        contact_persons=[contact_person_from_nested(cp) for cp in data.contact_persons],
    )

def apply_vendor_update(vendor: Vendor, data: VendorFields) -> None:
    for attr, value in _vendor_values(data).items():
        setattr(vendor, attr, value)

def vendor_to_out(vendor: Vendor) -> VendorOut:
    return VendorOut(id=vendor.id, **_vendor_values(vendor))

def vendor_to_with_children(vendor: Vendor) -> VendorWithChildren:
    return VendorWithChildren(
        id=vendor.id,
        **_vendor_values(vendor),
        bank_accounts=[bank_account_to_out(ba) for ba in vendor.bank_accounts],
        contact_persons=[contact_person_to_out(cp) for cp in vendor.contact_persons],
    )

# ------------------------------------------------------------------
# Bank account
# ------------------------------------------------------------------

def bank_account_from_nested(data: BankAccountNested) -> BankAccount:
    return BankAccount(iban=data.iban, bic=data.bic, name=data.name)

def bank_account_from_create(data: BankAccountCreate) -> BankAccount:
    return BankAccount(iban=data.iban, bic=data.bic, name=data.name, vendor_id=data.vendor_id)

def apply_bank_account_update(bank_account: BankAccount, data: BankAccountCreate) -> None:
    bank_account.iban = data.iban
    bank_account.bic = data.bic
    bank_account.name = data.name
    bank_account.vendor_id = data.vendor_id

def bank_account_to_out(bank_account: BankAccount) -> BankAccountOut:
    return BankAccountOut(
        id=bank_account.id,
        iban=bank_account.iban,
        bic=bank_account.bic,
        name=bank_account.name,
        vendor_id=bank_account.vendor_id,
    )

def bank_account_to_with_vendor(bank_account: BankAccount) -> BankAccountWithVendor:
    return BankAccountWithVendor(
        **bank_account_to_out(bank_account).model_dump(),
        vendor=vendor_to_out(bank_account.vendor) if bank_account.vendor else None,
    )

# ------------------------------------------------------------------
# Contact person
# ------------------------------------------------------------------

def contact_person_from_nested(data: ContactPersonNested) -> ContactPerson:
    return ContactPerson(
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        mail=data.mail,
    )

def contact_person_from_create(data: ContactPersonCreate) -> ContactPerson:
    person = contact_person_from_nested(data)
    person.vendor_id = data.vendor_id
    return person

def apply_contact_person_update(person: ContactPerson, data: ContactPersonCreate) -> None:
    person.first_name = data.first_name
    person.last_name = data.last_name
    person.phone = data.phone
    person.mail = data.mail
    person.vendor_id = data.vendor_id

def contact_person_to_out(person: ContactPerson) -> ContactPersonOut:
    return ContactPersonOut(
        id=person.id,
        first_name=person.first_name,
        last_name=person.last_name,
        phone=person.phone,
        mail=person.mail,
        vendor_id=person.vendor_id,
    )

def contact_person_to_with_vendor(person: ContactPerson) -> ContactPersonWithVendor:
    return ContactPersonWithVendor(
        **contact_person_to_out(person).model_dump(),
        vendor=vendor_to_out(person.vendor) if person.vendor else None,
    )

# ------------------------------------------------------------------
# User
# ------------------------------------------------------------------

def user_to_out(user: User) -> UserOut:
    return UserOut(id=user.id, email=user.email, roles=user.role_names)
