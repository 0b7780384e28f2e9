"""Contact person CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.cache import CacheService
from vendor_api.db.base import get_db
from vendor_api.domain.user import ROLE_ADMIN, ROLE_MANAGER
from vendor_api.routers.deps import get_cache, require_roles
from vendor_api.schemas.contact_person import (
    ContactPersonCreate,
    ContactPersonOut,
    ContactPersonUpdate,
)
from vendor_api.schemas.vendor import ContactPersonWithVendor
from vendor_api.services.contact_person import ContactPersonService

router = APIRouter(
    prefix="/contactperson",
    tags=["Contact persons"],
    dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_MANAGER))],
)


def _svc(session: AsyncSession, cache: CacheService) -> ContactPersonService:
    return ContactPersonService(session, cache)


@router.get("", response_model=list[ContactPersonWithVendor])
async def list_contact_persons(
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    return await _svc(session, cache).list_contact_persons()


@router.get("/{contact_person_id}", response_model=ContactPersonWithVendor)
async def get_contact_person(
    contact_person_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    return await _svc(session, cache).get_contact_person(contact_person_id)


@router.post("", response_model=ContactPersonOut, status_code=status.HTTP_201_CREATED)
async def create_contact_person(
    body: ContactPersonCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """Create a contact person. The phone is stored as "+" and digits only."""
    person = await _svc(session, cache).create_contact_person(body)
    response.headers["Location"] = str(
        request.url_for("get_contact_person", contact_person_id=person.id)
    )
    return person


@router.put("/{contact_person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_contact_person(
    contact_person_id: int,
    body: ContactPersonUpdate,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    await _svc(session, cache).update_contact_person(contact_person_id, body)


@router.delete(
    "/{contact_person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_roles(ROLE_ADMIN))],
)
async def delete_contact_person(
    contact_person_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    await _svc(session, cache).delete_contact_person(contact_person_id)
