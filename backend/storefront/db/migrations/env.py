# Alembic 驱动脚本，线上/离线模式都能跑

from __future__ import annotations

from alembic import context
from sqlalchemy import engine_from_config, pool
from logging.config import fileConfig
import logging

from storefront.core.config import settings
from storefront.core.logging import configure_logging
from storefront.db.base import Base
import storefront.db.model  # 关键：导入所有模型


config = context.config
logger = logging.getLogger("alembic.env")


# 用 Settings 覆盖连接串（优先于 ini）；外部传入 connection 时（测试）不覆盖
if settings.DATABASE_URL and "connection" not in config.attributes:
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))


# 日志：ini 有 logging 段就用；否则走 configure_logging（没有 ini 段会 KeyError）
try:
    if config.config_file_name:
        fileConfig(config.config_file_name, disable_existing_loggers=False)
    else:
        configure_logging()
except KeyError:
    configure_logging()


# Alembic 的目标元数据（包含所有 ORM 表）
target_metadata = Base.metadata


"""在不连接数据库的情况下生成 SQL（离线模式）"""
def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",   # SQLite 不支持 ALTER 加约束，走 batch
        compare_type=True,               # 比较列类型变化
        compare_server_default=True,     # 比较 server_default 变化
    )

    with context.begin_transaction():
        context.run_migrations()


"""连接数据库直接执行迁移（在线模式）"""
def run_migrations_online():
    connection = config.attributes.get("connection")
    if connection is not None:
        # 测试/脚本里已有连接：直接复用，不另建 Engine
        _run_with_connection(connection)
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        logger.info("running migrations against %s", connection.engine.url.render_as_string(hide_password=True))
        _run_with_connection(connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
