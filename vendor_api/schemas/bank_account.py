"""Bank account Pydantic schemas.

The read shape that embeds the owning vendor lives in ``schemas.vendor``.
"""

from pydantic import Field

from vendor_api.schemas.common import CamelModel

class BankAccountNested(CamelModel):
    """Bank account given inline when creating its vendor."""
    iban: str
    bic: str
    name: str = Field(min_length=1, max_length=255)

class BankAccountCreate(BankAccountNested):
    vendor_id: int

class BankAccountUpdate(BankAccountCreate):
    id: int

class BankAccountOut(BankAccountUpdate):
    pass
