from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.cart import CartDetail
    from storefront.db.model.product import Product
    from storefront.db.model.product_type import ProductType


UNIQUE_PRODUCT_SIZE = "unique_product_size_constraint"


"""
  sizes 表：尺码按商品类型划分（球拍 3U/4U，鞋 39/40 ...）
"""
class Size(TimestampMixin, Base):

    __tablename__ = "sizes"

    id:      Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    size_id: Mapped[str] = mapped_column("sizeId", String(255), unique=True, nullable=False)
    product_type_id: Mapped[int] = mapped_column(
        "productTypeId",
        Integer,
        ForeignKey("product_types.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    size_name: Mapped[str] = mapped_column("sizeName", String(255), nullable=False)

    product_type: Mapped["ProductType"] = relationship("ProductType", back_populates="sizes")

    product_sizes: Mapped[list["ProductSize"]] = relationship(
        "ProductSize",
        back_populates="size",
        cascade="all, delete",
        passive_deletes=True,
    )
    products: Mapped[list["Product"]] = relationship(
        "Product",
        secondary="product_sizes",
        back_populates="sizes",
        viewonly=True,
        order_by="Product.id",
    )
    cart_details: Mapped[list["CartDetail"]] = relationship(
        "CartDetail",
        back_populates="size",
        cascade="all, delete",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Size id={self.id} size_id={self.size_id!r}>"


"""
  product_sizes 表：商品 x 尺码 的库存
  - quantity: 库存；sold: 已售
  - (productId, sizeId) 唯一
"""
class ProductSize(TimestampMixin, Base):

    __tablename__ = "product_sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        "productId",
        Integer,
        ForeignKey("products.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    size_id: Mapped[int] = mapped_column(
        "sizeId",
        Integer,
        ForeignKey("sizes.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column("quantity", Integer, nullable=False)
    sold:     Mapped[int] = mapped_column("sold", Integer, nullable=False, default=0, server_default=text("0"))

    product: Mapped["Product"] = relationship("Product", back_populates="product_sizes")
    size:    Mapped["Size"] = relationship("Size", back_populates="product_sizes")

    __table_args__ = (
        UniqueConstraint("productId", "sizeId", name=UNIQUE_PRODUCT_SIZE),
    )

    @property
    def in_stock(self) -> int:
        return self.quantity - (self.sold or 0)
