from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.order import Order


class Voucher(TimestampMixin, Base):

    __tablename__ = "vouchers"

    id:            Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    voucher_id:    Mapped[str] = mapped_column("voucherId", String(255), unique=True, nullable=False)
    image:         Mapped[Optional[str]] = mapped_column("image", String(255), nullable=True)
    image_id:      Mapped[Optional[str]] = mapped_column("imageId", String(255), nullable=True)
    voucher_price: Mapped[int] = mapped_column("voucherPrice", Integer, nullable=False)
    quantity:      Mapped[int] = mapped_column("quantity", Integer, nullable=False)
    time_start:    Mapped[datetime] = mapped_column("timeStart", DateTime(timezone=True), nullable=False)
    time_end:      Mapped[datetime] = mapped_column("timeEnd", DateTime(timezone=True), nullable=False)

    # 删券时订单保留，orders.voucherId 由数据库置空（ON DELETE SET NULL），ORM 不级联删除
    orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="voucher",
        passive_deletes=True,
    )

    def is_active(self, at: datetime) -> bool:
        return self.quantity > 0 and self.time_start <= at <= self.time_end

    def __repr__(self) -> str:
        return f"<Voucher id={self.id} voucher_id={self.voucher_id!r}>"
