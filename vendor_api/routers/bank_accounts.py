"""Bank account CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendor_api.core.cache import CacheService
from vendor_api.db.base import get_db
from vendor_api.domain.user import ROLE_ADMIN, ROLE_MANAGER
from vendor_api.routers.deps import get_cache, require_roles
from vendor_api.schemas.bank_account import BankAccountCreate, BankAccountOut, BankAccountUpdate
from vendor_api.schemas.vendor import BankAccountWithVendor
from vendor_api.services.bank_account import BankAccountService

router = APIRouter(
    prefix="/bankaccount",
    tags=["Bank accounts"],
    dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_MANAGER))],
)


def _svc(session: AsyncSession, cache: CacheService) -> BankAccountService:
    return BankAccountService(session, cache)


@router.get("", response_model=list[BankAccountWithVendor])
async def list_bank_accounts(
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    return await _svc(session, cache).list_bank_accounts()


@router.get("/{bank_account_id}", response_model=BankAccountWithVendor)
async def get_bank_account(
    bank_account_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    return await _svc(session, cache).get_bank_account(bank_account_id)


@router.post("", response_model=BankAccountOut, status_code=status.HTTP_201_CREATED)
async def create_bank_account(
    body: BankAccountCreate,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    """Create a bank account. 400 when the IBAN or BIC is invalid."""
    account = await _svc(session, cache).create_bank_account(body)
    response.headers["Location"] = str(
        request.url_for("get_bank_account", bank_account_id=account.id)
    )
    return account


@router.put("/{bank_account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_bank_account(
    bank_account_id: int,
    body: BankAccountUpdate,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    await _svc(session, cache).update_bank_account(bank_account_id, body)


@router.delete(
    "/{bank_account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_roles(ROLE_ADMIN))],
)
async def delete_bank_account(
    bank_account_id: int,
    session: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
):
    await _svc(session, cache).delete_bank_account(bank_account_id)
