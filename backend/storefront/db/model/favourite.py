from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product
    from storefront.db.model.user import User


# 唯一约束名与迁移保持一致
UNIQUE_USER_PRODUCT = "unique_user_product_favourite_constraint"


"""
  favourites 表（users <-> products 的关联表）
  - 一个用户对同一商品最多收藏一次：由数据库唯一约束保证，不在应用层先查后插
  - 主键仍是单列自增 id
"""
class Favourite(TimestampMixin, Base):

    __tablename__ = "favourites"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        "userId",
        Integer,
        ForeignKey("users.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    product_id: Mapped[int] = mapped_column(
        "productId",
        Integer,
        ForeignKey("products.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    user:    Mapped["User"] = relationship("User", back_populates="favourites")
    product: Mapped["Product"] = relationship("Product", back_populates="favourites")

    __table_args__ = (
        UniqueConstraint("userId", "productId", name=UNIQUE_USER_PRODUCT),
    )
