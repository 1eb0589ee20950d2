from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product
    from storefront.db.model.size import Size
    from storefront.db.model.user import User


UNIQUE_CART_PRODUCT_SIZE = "unique_cart_product_size_constraint"


"""
  carts 表：每个用户一辆购物车（User.cart 一对一）
"""
class Cart(TimestampMixin, Base):

    __tablename__ = "carts"

    id:      Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cart_id: Mapped[str] = mapped_column("cartId", String(255), unique=True, nullable=False)
    user_id: Mapped[int] = mapped_column(
        "userId",
        Integer,
        ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    user: Mapped["User"] = relationship("User", back_populates="cart")
    cart_details: Mapped[list["CartDetail"]] = relationship(
        "CartDetail",
        back_populates="cart",
        cascade="all, delete",
        passive_deletes=True,
        order_by="CartDetail.id",
    )

    @property
    def total_price(self) -> int:
        return sum(d.total_price for d in self.cart_details)


"""
  cart_details 表：购物车里的一行（商品 + 尺码）
  - 同一购物车里 (productId, sizeId) 只有一行，加购时改 quantity
"""
class CartDetail(TimestampMixin, Base):

    __tablename__ = "cart_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cart_id: Mapped[int] = mapped_column(
        "cartId",
        Integer,
        ForeignKey("carts.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
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
    quantity:    Mapped[int] = mapped_column("quantity", Integer, nullable=False, default=1, server_default=text("1"))
    total_price: Mapped[int] = mapped_column("totalPrice", Integer, nullable=False)

    cart:    Mapped["Cart"] = relationship("Cart", back_populates="cart_details")
    product: Mapped["Product"] = relationship("Product", back_populates="cart_details")
    size:    Mapped["Size"] = relationship("Size", back_populates="cart_details")

    __table_args__ = (
        UniqueConstraint("cartId", "productId", "sizeId", name=UNIQUE_CART_PRODUCT_SIZE),
    )
