from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import Optional
from storefront.db.model.user import User
from storefront.core.security import get_password_hash


def get_by_id(db: Session, user_pk: int) -> Optional[User]:
    return db.get(User, user_pk)


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalars(select(User).where(User.email == email)).first()


def create_user(db: Session, user_name: str, email: str, password: str, role_pk: int,
                phone_number: str | None = None, status: int = 0) -> User:
    """明文密码进来，落库前统一 bcrypt；email 重复时数据库唯一约束报 IntegrityError"""
    user = User(
        user_name=user_name,
        email=email,
        password=get_password_hash(password),
        role_id=role_pk,
        phone_number=phone_number,
        status=status,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_pk: int) -> bool:
    """删除用户；其 favourites 由外键 ON DELETE CASCADE 一并删除"""
    user = db.get(User, user_pk)
    if user is None:
        return False
    db.delete(user)
    db.commit()
    return True
