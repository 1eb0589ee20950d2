from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.brand import Brand
    from storefront.db.model.cart import CartDetail
    from storefront.db.model.feedback import Feedback
    from storefront.db.model.order import OrderHistory
    from storefront.db.model.favourite import Favourite
    from storefront.db.model.product_type import ProductType
    from storefront.db.model.size import ProductSize, Size
    from storefront.db.model.user import User


"""
  products 表
  - product_id: 业务键（唯一）
  - brand_id / product_type_id: 整型外键，指向 brands.id / product_types.id（级联更新/删除）
"""
class Product(TimestampMixin, Base):

    __tablename__ = "products"

    id:         Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column("productId", String(255), unique=True, nullable=False)

    product_type_id: Mapped[int] = mapped_column(
        "productTypeId",
        Integer,
        ForeignKey("product_types.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )
    brand_id: Mapped[int] = mapped_column(
        "brandId",
        Integer,
        ForeignKey("brands.id", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
    )

    name:     Mapped[str] = mapped_column("name", String(255), nullable=False)
    image:    Mapped[Optional[str]] = mapped_column("image", String(255), nullable=True)
    image_id: Mapped[Optional[str]] = mapped_column("imageId", String(255), nullable=True)
    price:    Mapped[int] = mapped_column("price", Integer, nullable=False)
    discount: Mapped[Optional[int]] = mapped_column("discount", Integer, nullable=True, default=0, server_default=text("0"))
    rating:   Mapped[Optional[int]] = mapped_column("rating", Integer, nullable=True, default=0, server_default=text("0"))

    description_content: Mapped[Optional[str]] = mapped_column("descriptionContent", Text, nullable=True)
    description_html:    Mapped[Optional[str]] = mapped_column("descriptionHTML", Text, nullable=True)

    brand:        Mapped["Brand"] = relationship("Brand", back_populates="products")
    product_type: Mapped["ProductType"] = relationship("ProductType", back_populates="products")

    favourites: Mapped[list["Favourite"]] = relationship(
        "Favourite",
        back_populates="product",
        cascade="all, delete",
        passive_deletes=True,
    )
    favourited_by_users: Mapped[list["User"]] = relationship(
        "User",
        secondary="favourites",
        back_populates="favourite_products",
        viewonly=True,
        order_by="User.id",
    )

    # 库存行；尺码列表经 product_sizes 只读
    product_sizes: Mapped[list["ProductSize"]] = relationship(
        "ProductSize",
        back_populates="product",
        cascade="all, delete",
        passive_deletes=True,
    )
    sizes: Mapped[list["Size"]] = relationship(
        "Size",
        secondary="product_sizes",
        back_populates="products",
        viewonly=True,
        order_by="Size.id",
    )
    feedbacks: Mapped[list["Feedback"]] = relationship(
        "Feedback",
        back_populates="product",
        cascade="all, delete",
        passive_deletes=True,
        order_by="Feedback.id",
    )
    cart_details: Mapped[list["CartDetail"]] = relationship(
        "CartDetail",
        back_populates="product",
        cascade="all, delete",
        passive_deletes=True,
    )
    order_histories: Mapped[list["OrderHistory"]] = relationship(
        "OrderHistory",
        back_populates="product",
        cascade="all, delete",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} product_id={self.product_id!r}>"
