# Engine/Session 工厂 + 请求级会话依赖

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Generator, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from storefront.core.config import settings


logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite 默认不校验外键；不开的话 ON DELETE CASCADE 形同虚设
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str | None = None, **overrides: Any) -> Engine:
    """
    按 URL 方言创建 Engine。
      - PostgreSQL：连接池参数取自 settings
      - SQLite：开启外键约束；内存库用 StaticPool，保证同一进程看到同一个库
    """
    url = url or settings.DATABASE_URL

    if url.startswith("sqlite"):
        kwargs: dict[str, Any] = {"echo": settings.DB_ECHO, "future": True}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
        kwargs.update(overrides)
        eng = create_engine(url, **kwargs)
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
        return eng

    kwargs = {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,      # 连接失效探测，避免 "server closed the connection"
        "pool_recycle": settings.DB_POOL_RECYCLE,   # 防止长连接被中间设备断开
        "echo": settings.DB_ECHO,
        "future": True,
    }
    kwargs.update(overrides)
    return create_engine(url, **kwargs)


# ---- Engine ----
engine = build_engine()


# ---- Session Factory ----
# 注意：autocommit=False, autoflush=False 更易控事务与 flush 时机
def build_sessionmaker(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,  # 提交后对象仍可用（减少再次查询）
        class_=Session,
        future=True,
    )


SessionLocal: sessionmaker[Session] = build_sessionmaker(engine)



'''
请求级依赖：为每个请求提供独立会话
用法（FastAPI 等框架）：
def endpoint(db: Session = Depends(get_db)): ...
'''
def get_db() -> Generator[Session, None, None]:
    db: Session = SessionLocal()
    try:
        yield db    # 业务中应在 repo 中明确 db.commit()/rollback()；此处不做隐式提交
    finally:
        db.close()  # 归还连接到连接池



# ---- 脚本/任务里的简便上下文管理器 ----
@contextmanager
def session_scope(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:

    db: Session = (factory or SessionLocal)()
    try:
        yield db    # 不在这里隐式 commit；repo 层显式 commit/rollback
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ---- 优雅关停：在应用 shutdown 时释放连接池 ----
"""
    释放连接池中的所有连接；在应用 shutdown 钩子中调用。
"""
def dispose_engine() -> None:
    logger.info("disposing engine pool for %s", engine.url.render_as_string(hide_password=True))
    engine.dispose()
