"""SQLAlchemy ORM model for vendor contact persons."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vendor_api.db.base import Base
from vendor_api.domain.mixins import TimestampMixin

if TYPE_CHECKING:
    from vendor_api.domain.vendor import Vendor


class ContactPerson(Base, TimestampMixin):
    __tablename__ = "contact_persons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    # Stored normalized: "+" followed by digits only
    phone: Mapped[str] = mapped_column(String(16), nullable=False)  # "+" and up to 15 digits
    mail: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)

    vendor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    vendor: Mapped["Vendor"] = relationship(back_populates="contact_persons", lazy="raise")

    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
