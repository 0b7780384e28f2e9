"""Vendor Pydantic schemas (request DTOs and response models)."""

from pydantic import Field

from vendor_api.schemas.bank_account import BankAccountNested, BankAccountOut
from vendor_api.schemas.common import CamelModel
from vendor_api.schemas.contact_person import ContactPersonNested, ContactPersonOut

class VendorFields(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    name2: str | None = Field(default=None, max_length=255)
    address1: str = Field(min_length=1, max_length=255)
    address2: str | None = Field(default=None, max_length=255)
    zip: str | None = Field(default=None, max_length=20)
    country: str = Field(min_length=1, max_length=100)
    city: str | None = Field(default=None, max_length=100)
    mail: str = Field(min_length=1, max_length=320)
    phone: str = Field(min_length=1, max_length=50)
    notes: str | None = None

class VendorCreate(VendorFields):
    bank_accounts: list[BankAccountNested] = Field(default_factory=list)
    contact_persons: list[ContactPersonNested] = Field(default_factory=list)

class VendorUpdate(VendorFields):
    """Full replacement of a vendor's own fields; ``id`` must match the path."""
    id: int

class VendorOut(VendorFields):
    id: int

class VendorWithChildren(VendorOut):
    bank_accounts: list[BankAccountOut] = Field(default_factory=list)
    contact_persons: list[ContactPersonOut] = Field(default_factory=list)

class BankAccountWithVendor(BankAccountOut):
    vendor: VendorOut | None = None

class ContactPersonWithVendor(ContactPersonOut):
    vendor: VendorOut | None = None
