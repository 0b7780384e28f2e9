"""Contact person Pydantic schemas.

The read shape that embeds the owning vendor lives in ``schemas.vendor``.
"""

from pydantic import Field

from vendor_api.schemas.common import CamelModel

class ContactPersonNested(CamelModel):
    """Contact person given inline when creating its vendor."""
    first_name: str | None = Field(default=None, max_length=1000)
    last_name: str | None = Field(default=None, max_length=1000)
    phone: str
    mail: str | None = Field(default=None, max_length=320)

class ContactPersonCreate(ContactPersonNested):
    # 0 / missing never matches a vendor and is rejected as "missing"
    vendor_id: int = 0

class ContactPersonUpdate(ContactPersonCreate):
    id: int

class ContactPersonOut(ContactPersonUpdate):
    pass
