
from __future__ import annotations
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.core.security import get_password_hash, verify_password
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.cart import Cart
    from storefront.db.model.delivery_address import DeliveryAddress
    from storefront.db.model.favourite import Favourite
    from storefront.db.model.feedback import Feedback
    from storefront.db.model.order import Order
    from storefront.db.model.product import Product
    from storefront.db.model.role import Role


class User(TimestampMixin, Base):

    __tablename__ = "users"

    id:        Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_name: Mapped[str] = mapped_column("userName", String(255), nullable=False)
    password:  Mapped[str] = mapped_column("password", String(255), nullable=False)   # 只存 bcrypt 哈希
    email:     Mapped[str] = mapped_column("email", String(255), unique=True, nullable=False)

    avatar:       Mapped[Optional[str]] = mapped_column("avatar", String(255), nullable=True)
    avatar_id:    Mapped[Optional[str]] = mapped_column("avatarId", String(255), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column("phoneNumber", String(255), nullable=True)
    birthday:     Mapped[Optional[date]] = mapped_column("birthday", Date, nullable=True)
    otp_code:     Mapped[Optional[str]] = mapped_column("otpCode", String(255), nullable=True)      # 字符串，保留前导 0
    time_otp:     Mapped[Optional[datetime]] = mapped_column("timeOtp", DateTime(timezone=True), nullable=True)

    role_id: Mapped[int] = mapped_column(
        "roleId",
        Integer,
        ForeignKey("roles.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    token_register: Mapped[Optional[str]] = mapped_column("tokenRegister", String(255), nullable=True)
    status: Mapped[int] = mapped_column("status", Integer, nullable=False, default=0, server_default=text("0"))

    role: Mapped["Role"] = relationship("Role", back_populates="users")

    favourites: Mapped[list["Favourite"]] = relationship(
        "Favourite",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
    )
    # 经 favourites 关联表的多对多；写入请走 favourite_repo
    favourite_products: Mapped[list["Product"]] = relationship(
        "Product",
        secondary="favourites",
        back_populates="favourited_by_users",
        viewonly=True,
        order_by="Product.id",
    )

    # 一个用户一辆购物车
    cart: Mapped[Optional["Cart"]] = relationship(
        "Cart",
        back_populates="user",
        uselist=False,
        cascade="all, delete",
        passive_deletes=True,
    )
    orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
        order_by="Order.id",
    )
    feedbacks: Mapped[list["Feedback"]] = relationship(
        "Feedback",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
    )
    delivery_addresses: Mapped[list["DeliveryAddress"]] = relationship(
        "DeliveryAddress",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
        order_by="DeliveryAddress.id",
    )

    def set_password(self, plain_password: str) -> None:
        self.password = get_password_hash(plain_password)

    def valid_password(self, plain_password: str) -> bool:
        return verify_password(plain_password, self.password)

    def to_dict(self) -> dict[str, Any]:
        """对外输出：默认不带 password"""
        return {
            "id": self.id,
            "userName": self.user_name,
            "email": self.email,
            "avatar": self.avatar,
            "phoneNumber": self.phone_number,
            "birthday": self.birthday.isoformat() if self.birthday else None,
            "roleId": self.role_id,
            "status": self.status,
        }

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
