from __future__ import annotations
import enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product
    from storefront.db.model.size import Size
    from storefront.db.model.user import User
    from storefront.db.model.voucher import Voucher


UNIQUE_ORDER_PRODUCT_SIZE = "unique_order_product_size_constraint"


class OrderStatus(enum.IntEnum):
    PENDING = 0
    CONFIRMED = 1
    SHIPPED = 2
    DELIVERED = 3


"""
  orders 表
  - status 存整数（见 OrderStatus），默认 0 = 待确认
  - voucherId 可空；券被删时数据库置空，订单本身保留
"""
class Order(TimestampMixin, Base):

    __tablename__ = "orders"

    id:       Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[str] = mapped_column("orderId", String(255), unique=True, nullable=False)
    user_id: Mapped[int] = mapped_column(
        "userId",
        Integer,
        ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    voucher_id: Mapped[Optional[int]] = mapped_column(
        "voucherId",
        Integer,
        ForeignKey("vouchers.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
    )
    total_price:      Mapped[int] = mapped_column("totalPrice", Integer, nullable=False)
    payment:          Mapped[str] = mapped_column("payment", String(255), nullable=False)
    delivery_address: Mapped[str] = mapped_column("deliveryAddress", Text, nullable=False)
    status: Mapped[int] = mapped_column(
        "status", Integer, nullable=False, default=OrderStatus.PENDING, server_default=text("0")
    )

    user:    Mapped["User"] = relationship("User", back_populates="orders")
    voucher: Mapped[Optional["Voucher"]] = relationship("Voucher", back_populates="orders")
    order_histories: Mapped[list["OrderHistory"]] = relationship(
        "OrderHistory",
        back_populates="order",
        cascade="all, delete",
        passive_deletes=True,
        order_by="OrderHistory.id",
    )

    def __repr__(self) -> str:
        return f"<Order id={self.id} order_id={self.order_id!r} status={self.status}>"


"""
  order_histories 表：订单明细（下单时的数量/金额快照）
  - statusFeedback: 0 未评价，1 已评价
"""
class OrderHistory(TimestampMixin, Base):

    __tablename__ = "order_histories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        "orderId",
        Integer,
        ForeignKey("orders.id", onupdate="CASCADE", ondelete="CASCADE"),
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
    quantity:        Mapped[int] = mapped_column("quantity", Integer, nullable=False)
    total_price:     Mapped[int] = mapped_column("totalPrice", Integer, nullable=False)
    status_feedback: Mapped[int] = mapped_column(
        "statusFeedback", Integer, nullable=False, default=0, server_default=text("0")
    )

    order:   Mapped["Order"] = relationship("Order", back_populates="order_histories")
    product: Mapped["Product"] = relationship("Product", back_populates="order_histories")
    size:    Mapped["Size"] = relationship("Size")

    __table_args__ = (
        UniqueConstraint("orderId", "productId", "sizeId", name=UNIQUE_ORDER_PRODUCT_SIZE),
    )
