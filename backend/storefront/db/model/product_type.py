from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product
    from storefront.db.model.size import Size


class ProductType(TimestampMixin, Base):

    __tablename__ = "product_types"

    id:                Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_type_id:   Mapped[str] = mapped_column("productTypeId", String(255), unique=True, nullable=False)   # RACKET / SHOES / SHIRT
    product_type_name: Mapped[str] = mapped_column("productTypeName", String(255), nullable=False)

    products: Mapped[list["Product"]] = relationship(
        "Product",
        back_populates="product_type",
        cascade="all, delete",
        passive_deletes=True,
    )
    sizes: Mapped[list["Size"]] = relationship(
        "Size",
        back_populates="product_type",
        cascade="all, delete",
        passive_deletes=True,
        order_by="Size.id",
    )

