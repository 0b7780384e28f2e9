"""SQLAlchemy ORM model for Vendors.

A vendor owns its bank accounts and contact persons: deleting the vendor
deletes them (ORM cascade for loaded children, ``ON DELETE CASCADE`` in the
store for the rest). ``version`` is the optimistic-concurrency token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vendor_api.db.base import Base
from vendor_api.domain.mixins import TimestampMixin

if TYPE_CHECKING:
    from vendor_api.domain.bank_account import BankAccount
    from vendor_api.domain.contact_person import ContactPerson


class Vendor(Base, TimestampMixin):
    __tablename__ = "vendors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address1: Mapped[str] = mapped_column(String(255), nullable=False)
    address2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zip: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    mail: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    bank_accounts: Mapped[List["BankAccount"]] = relationship(
        back_populates="vendor",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
        order_by="BankAccount.id",
    )
    contact_persons: Mapped[List["ContactPerson"]] = relationship(
        back_populates="vendor",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
        order_by="ContactPerson.id",
    )

    __mapper_args__ = {"version_id_col": version}
