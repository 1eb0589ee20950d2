# 日志：根 logger 打到 stdout；SQL / 迁移等第三方 logger 单独定级

import logging
import sys
from typing import Optional

from storefront.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 第三方 logger 默认级别；SQL 语句默认不刷屏
LIBRARY_LEVELS = {
    "alembic": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "passlib": logging.ERROR,     # passlib 读取 bcrypt 版本号时的告警
}


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def configure_logging(level: Optional[str] = None, sql_echo: Optional[bool] = None) -> logging.Logger:
    """
    脚本 / 迁移入口调用一次：
      - level 缺省取 settings.LOG_LEVEL
      - sql_echo 缺省取 settings.DB_ECHO；为 True 时 sqlalchemy.engine 提到 INFO（打印 SQL）
    根 logger 已有 handler（alembic.ini 的 fileConfig、pytest）时只调级别，不再挂 handler
    """
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not root.handlers:
        root.addHandler(_stdout_handler())

    for name, lib_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(lib_level)

    echo = settings.DB_ECHO if sql_echo is None else sql_echo
    if echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return get_logger()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """storefront 命名空间下的 logger：get_logger("seed") -> "storefront.seed" """
    return logging.getLogger(f"storefront.{name}" if name else "storefront")
