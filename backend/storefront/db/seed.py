# 初始数据：品牌 + 商品类型（只补缺，不覆盖已有行）

from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Dict

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.db.model.brand import Brand
from storefront.db.model.product_type import ProductType


logger = logging.getLogger(__name__)


def _ts(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d %H:%M:%S").replace(tzinfo=timezone.utc)


# (brandId, brandName, createdAt, updatedAt)
INITIAL_BRANDS = [
    ("ADI", "Adidas",   "2023-11-06 00:47:47", "2023-11-06 00:47:47"),
    ("FEL", "Felet",    "2023-11-06 00:50:10", "2023-11-06 00:50:10"),
    ("KAM", "Kamito",   "2023-11-06 00:49:40", "2023-11-06 00:49:40"),
    ("KAW", "Kawasaki", "2023-11-06 00:46:36", "2023-11-06 00:46:36"),
    ("KUM", "Kumpoo",   "2023-11-06 00:46:57", "2023-11-06 00:46:57"),
    ("LN",  "Lining",   "2023-11-06 00:45:04", "2023-11-06 00:45:04"),
    ("MIZ", "Mizuno",   "2023-11-06 00:48:44", "2023-11-06 00:48:53"),
    ("VNB", "VNB",      "2023-12-14 22:15:41", "2023-12-14 22:15:41"),
    ("VIC", "Victor",   "2023-11-06 00:45:46", "2023-11-06 00:45:46"),
    ("YN",  "Yonex",    "2023-11-06 00:44:13", "2023-11-06 00:44:13"),
]

# (productTypeId, productTypeName, createdAt)
INITIAL_PRODUCT_TYPES = [
    ("RACKET", "Vợt cầu lông",  "2023-11-19 12:37:49"),
    ("SHOES",  "Giày cầu lông", "2023-11-19 12:38:05"),
    ("SHIRT",  "Áo cầu lông",   "2023-11-19 12:38:10"),
]


def seed_brands(db: Session) -> int:
    existing = set(db.scalars(select(Brand.brand_id)))
    inserted = 0
    for brand_id, brand_name, created, updated in INITIAL_BRANDS:
        if brand_id in existing:
            continue
        db.add(Brand(brand_id=brand_id, brand_name=brand_name,
                     created_at=_ts(created), updated_at=_ts(updated)))
        inserted += 1
    return inserted


def seed_product_types(db: Session) -> int:
    existing = set(db.scalars(select(ProductType.product_type_id)))
    inserted = 0
    for type_id, type_name, created in INITIAL_PRODUCT_TYPES:
        if type_id in existing:
            continue
        db.add(ProductType(product_type_id=type_id, product_type_name=type_name,
                           created_at=_ts(created), updated_at=_ts(created)))
        inserted += 1
    return inserted


def seed_initial_data(db: Session) -> Dict[str, int]:
    """幂等：重复执行只会插入缺的行；返回每张表本次插入的行数"""
    counts = {
        "brands": seed_brands(db),
        "product_types": seed_product_types(db),
    }
    db.commit()
    logger.info("seeded initial data: %s", counts)
    return counts
