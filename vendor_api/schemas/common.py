"""Base schema for every wire DTO, plus the health-check body."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire (``vendor_id`` <-> ``vendorId``).

    ``populate_by_name`` lets services build DTOs with the Python names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    app: str
    env: str
