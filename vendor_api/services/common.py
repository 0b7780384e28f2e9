"""Helpers shared by the entity services."""

from vendor_api.core.exceptions import ConcurrencyConflictError, NotFoundError, ValidationError
from vendor_api.repositories.base import SaveResult

VENDOR_MISSING_MESSAGE = "VendorId is missing or does not exist"


def ensure_ids_match(route_id: int, body_id: int) -> None:
    if route_id != body_id:
        raise ValidationError(
            "The id in the URL does not match the id in the body",
            {"id": f"Expected {route_id}, got {body_id}."},
        )


def ensure_saved(result: SaveResult, entity: str, entity_id: int) -> None:
    """Turn a non-SAVED optimistic-concurrency outcome into the matching error."""
    if result is SaveResult.MISSING:
        raise NotFoundError(entity, entity_id)
    if result is SaveResult.CONFLICT:
        raise ConcurrencyConflictError(entity, entity_id)
