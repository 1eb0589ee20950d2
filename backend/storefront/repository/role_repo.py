from sqlalchemy import select
from sqlalchemy.orm import Session
from typing import Optional
from storefront.db.model.role import Role
from storefront.db.model.user import User


def get_by_role_id(db: Session, role_id: str) -> Optional[Role]:
    return db.scalars(select(Role).where(Role.role_id == role_id)).first()


def list_all(db: Session) -> list[Role]:
    stmt = select(Role).order_by(Role.id.asc())
    return list(db.scalars(stmt))


def create_role(db: Session, role_id: str, role_name: str) -> Role:
    role = Role(role_id=role_id, role_name=role_name)
    db.add(role)
    db.commit()
    db.refresh(role)
    return role


def get_users(db: Session, role_pk: int) -> list[User]:
    """某角色下的全部用户（按 users.roleId = roles.id）"""
    stmt = select(User).where(User.role_id == role_pk).order_by(User.id.asc())
    return list(db.scalars(stmt))
