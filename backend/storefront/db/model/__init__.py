# 聚合导入所有模型，供 Alembic 发现 + 启动时统一配置关联

import logging

from sqlalchemy.orm import configure_mappers

from storefront.db.base import Base
from .role import Role
from .user import User
from .brand import Brand
from .product_type import ProductType
from .product import Product
from .favourite import Favourite
from .size import Size, ProductSize
from .voucher import Voucher
from .cart import Cart, CartDetail
from .order import Order, OrderHistory, OrderStatus
from .feedback import Feedback
from .delivery_address import DeliveryAddress

__all__ = [
    "Role", "User", "Brand", "ProductType", "Product", "Favourite",
    "Size", "ProductSize", "Voucher", "Cart", "CartDetail",
    "Order", "OrderHistory", "OrderStatus", "Feedback", "DeliveryAddress",
    "configure_models",
]


logger = logging.getLogger(__name__)


"""
  关联配置（只在启动时跑一次）：
    - 各模型里的 relationship 都用字符串引用对方，声明期不互相依赖
    - 所有模型 import 完成后，configure_mappers() 统一解析这些引用
  返回 模型名 -> 模型类，供查询等处复用
"""
def configure_models() -> dict[str, type[Base]]:
    configure_mappers()
    models = {mapper.class_.__name__: mapper.class_ for mapper in Base.registry.mappers}
    logger.debug("configured %d models: %s", len(models), ", ".join(sorted(models)))
    return models
