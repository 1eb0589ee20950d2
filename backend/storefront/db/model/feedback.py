from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.product import Product
    from storefront.db.model.user import User


# 每个用户对同一商品只能评价一次
UNIQUE_USER_PRODUCT_FEEDBACK = "unique_user_product_feedback_constraint"


class Feedback(TimestampMixin, Base):

    __tablename__ = "feedbacks"

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
    description: Mapped[Optional[str]] = mapped_column("description", Text, nullable=True)
    rating:      Mapped[int] = mapped_column("rating", Integer, nullable=False)

    user:    Mapped["User"] = relationship("User", back_populates="feedbacks")
    product: Mapped["Product"] = relationship("Product", back_populates="feedbacks")

    __table_args__ = (
        UniqueConstraint("userId", "productId", name=UNIQUE_USER_PRODUCT_FEEDBACK),
    )
