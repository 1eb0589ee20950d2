from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.user import User


class DeliveryAddress(TimestampMixin, Base):

    __tablename__ = "delivery_addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        "userId",
        Integer,
        ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    address: Mapped[str] = mapped_column("address", String(255), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="delivery_addresses")
