# 品牌 / 商品类型 / 商品 的基础读写

from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.model.brand import Brand
from storefront.db.model.product import Product
from storefront.db.model.product_type import ProductType
from storefront.db.model.size import ProductSize, Size


# ---------- Brand ----------
def get_brand_by_brand_id(db: Session, brand_id: str) -> Optional[Brand]:
    return db.scalars(select(Brand).where(Brand.brand_id == brand_id)).first()


def list_brands(db: Session) -> list[Brand]:
    stmt = select(Brand).order_by(Brand.brand_name.asc())
    return list(db.scalars(stmt))


def create_brand(db: Session, brand_id: str, brand_name: str) -> Brand:
    brand = Brand(brand_id=brand_id, brand_name=brand_name)
    db.add(brand)
    db.commit()
    db.refresh(brand)
    return brand


# ---------- ProductType ----------
def get_product_type_by_type_id(db: Session, product_type_id: str) -> Optional[ProductType]:
    return db.scalars(select(ProductType).where(ProductType.product_type_id == product_type_id)).first()


def create_product_type(db: Session, product_type_id: str, product_type_name: str) -> ProductType:
    ptype = ProductType(product_type_id=product_type_id, product_type_name=product_type_name)
    db.add(ptype)
    db.commit()
    db.refresh(ptype)
    return ptype


# ---------- Product ----------
def get_product_by_product_id(db: Session, product_id: str) -> Optional[Product]:
    return db.scalars(select(Product).where(Product.product_id == product_id)).first()


def create_product(db: Session, *, product_id: str, name: str, price: int,
                   brand_pk: int, product_type_pk: int, **extra) -> Product:
    """
    extra 允许：image, image_id, discount, rating, description_content, description_html
    """
    allowed = {"image", "image_id", "discount", "rating", "description_content", "description_html"}
    unknown = set(extra) - allowed
    if unknown:
        raise ValueError(f"unknown product fields: {sorted(unknown)}")

    product = Product(
        product_id=product_id,
        name=name,
        price=price,
        brand_id=brand_pk,
        product_type_id=product_type_pk,
        **extra,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product_pk: int) -> bool:
    product = db.get(Product, product_pk)
    if product is None:
        return False
    db.delete(product)
    db.commit()
    return True


# ---------- Size / 库存 ----------
def create_size(db: Session, size_id: str, size_name: str, product_type_pk: int) -> Size:
    size = Size(size_id=size_id, size_name=size_name, product_type_id=product_type_pk)
    db.add(size)
    db.commit()
    db.refresh(size)
    return size


def add_product_size(db: Session, product_pk: int, size_pk: int, quantity: int) -> ProductSize:
    """
    同一 (product, size) 重复添加由 unique_product_size_constraint 拒绝，IntegrityError 直接抛出
    """
    row = ProductSize(product_id=product_pk, size_id=size_pk, quantity=quantity)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_product_sizes(db: Session, product_pk: int) -> list[ProductSize]:
    stmt = select(ProductSize).where(ProductSize.product_id == product_pk).order_by(ProductSize.size_id.asc())
    return list(db.scalars(stmt))
