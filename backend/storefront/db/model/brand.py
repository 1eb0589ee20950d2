from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product


class Brand(TimestampMixin, Base):

    __tablename__ = "brands"

    id:         Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    brand_id:   Mapped[str] = mapped_column("brandId", String(255), unique=True, nullable=False)   # 业务键：ADI / YN ...
    brand_name: Mapped[str] = mapped_column("brandName", String(255), nullable=False)

    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="brand",
        cascade="all, delete",
        passive_deletes=True,
    )
