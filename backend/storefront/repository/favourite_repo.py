from __future__ import annotations

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session

from storefront.db.model.favourite import Favourite


"""
  收藏写入不做“先查后插”：
    - 同一 (user, product) 第二次插入由数据库唯一约束
      unique_user_product_favourite_constraint 拒绝，IntegrityError 原样抛给调用方
    - 调用方负责 rollback（或使用 session_scope）
"""
def add_favourite(db: Session, user_pk: int, product_pk: int) -> Favourite:
    fav = Favourite(user_id=user_pk, product_id=product_pk)
    db.add(fav)
    db.commit()
    db.refresh(fav)
    return fav


def remove_favourite(db: Session, user_pk: int, product_pk: int) -> bool:
    """返回是否真的删掉了一行"""
    result = db.execute(
        delete(Favourite).where(
            Favourite.user_id == user_pk,
            Favourite.product_id == product_pk,
        )
    )
    db.commit()
    return (result.rowcount or 0) > 0


def list_favourite_product_ids(db: Session, user_pk: int) -> list[int]:
    stmt = (
        select(Favourite.product_id)
        .where(Favourite.user_id == user_pk)
        .order_by(Favourite.id.asc())
    )
    return list(db.scalars(stmt))


def is_favourite(db: Session, user_pk: int, product_pk: int) -> bool:
    stmt = select(
        exists().where(
            Favourite.user_id == user_pk,
            Favourite.product_id == product_pk,
        )
    )
    return bool(db.scalar(stmt))
