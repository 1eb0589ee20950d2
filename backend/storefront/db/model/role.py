from __future__ import annotations
from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from storefront.db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from storefront.db.model.user import User


"""
  roles 表
  - id: 代理主键（users.roleId 指向它）
  - role_id: 业务键，例如 'R1' / 'admin'
"""
class Role(TimestampMixin, Base):

    __tablename__ = "roles"

    id:        Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role_id:   Mapped[str] = mapped_column("roleId", String(255), unique=True, nullable=False)
    role_name: Mapped[str] = mapped_column("roleName", String(255), nullable=False)

    # 一个角色对应多个用户；删除角色时由数据库外键 CASCADE 处理用户行
    users: Mapped[list["User"]] = relationship(
        "User",
        back_populates="role",
        cascade="all, delete",
        passive_deletes=True,
        order_by="User.id",
    )

    def get_users(self) -> list["User"]:
        return list(self.users)

    def __repr__(self) -> str:
        return f"<Role id={self.id} role_id={self.role_id!r}>"
