"""User management schemas."""

from pydantic import EmailStr, Field

from vendor_api.schemas.common import CamelModel

class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)
    role: str | None = None

class UserOut(CamelModel):
    id: str
    email: str
    roles: list[str] = Field(default_factory=list)
