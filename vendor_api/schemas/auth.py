"""Login / token refresh schemas."""

from pydantic import EmailStr

from vendor_api.schemas.common import CamelModel

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class AccessTokenResponse(CamelModel):
    access_token: str

class RefreshTokenRequest(CamelModel):
    access_token: str

class RefreshTokenResponse(CamelModel):
    new_access_token: str
