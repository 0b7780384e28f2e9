"""Vendor CRUD router.

Pattern:
  1. Declare a router with prefix, tags and the role guard
  2. Inject DB session + cache via Depends
  3. Instantiate the service with (session, cache)
  4. Call service methods and shape the HTTP response
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.cache import CacheService
from vendor_api.db.base import get_db
from vendor_api.domain.user import ROLE_ADMIN, ROLE_MANAGER
from vendor_api.routers.deps import get_cache, require_roles
from vendor_api.schemas.vendor import VendorCreate, VendorUpdate, VendorWithChildren
from vendor_api.services.vendor import VendorService

router = APIRouter(
    prefix="/vendor",
    tags=["Vendors"],
    dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_MANAGER))],
)


def _svc(session: AsyncSession, cache: CacheService) -> VendorService:
    return VendorService(session, cache)


@router.get("", response_model=list[VendorWithChildren])
async def list_vendors(
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """List all vendors with their bank accounts and contact persons."""
    return await _svc(session, cache).list_vendors()


@router.get("/{vendor_id}", response_model=VendorWithChildren)
async def get_vendor(
    vendor_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    return await _svc(session, cache).get_vendor(vendor_id)


@router.post("", response_model=VendorWithChildren, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """Create a vendor, optionally with inline bank accounts and contact persons."""
    vendor = await _svc(session, cache).create_vendor(body)
    response.headers["Location"] = str(request.url_for("get_vendor", vendor_id=vendor.id))
    return vendor


@router.put("/{vendor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_vendor(
    vendor_id: int,
    body: VendorUpdate,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """Replace the vendor's own fields. Children are managed via their own endpoints."""
    await _svc(session, cache).update_vendor(vendor_id, body)


@router.delete(
    "/{vendor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_roles(ROLE_ADMIN))],
)
async def delete_vendor(
    vendor_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """Delete a vendor together with its bank accounts and contact persons."""
    await _svc(session, cache).delete_vendor(vendor_id)
