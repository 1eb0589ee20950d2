import os

# 测试一律走 SQLite，不碰开发/线上库；必须在 import storefront 之前设置
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.orm import Session

from storefront.db.base import Base
from storefront.db.model import configure_models
from storefront.db.session import build_engine, build_sessionmaker
from storefront.repository import catalog_repo, role_repo, user_repo


@pytest.fixture(scope="session")
def models():
    """关联配置只跑一次，和应用启动一致"""
    return configure_models()


@pytest.fixture
def engine(models):
    """每个测试一个全新的内存库（外键约束已开启）"""
    eng = build_engine("sqlite://")
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def db_session(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ---------- 常用对象图：role -> user, brand + product_type -> product ----------
@pytest.fixture
def role(db_session):
    return role_repo.create_role(db_session, "R1", "Customer")


@pytest.fixture
def make_user(db_session, role):

    def _make(email: str = "alice@example.com", role_pk: int | None = None):
        return user_repo.create_user(
            db_session,
            user_name=email.split("@")[0],
            email=email,
            password="s3cret-pass",
            role_pk=role_pk or role.id,
        )

    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def brand(db_session):
    return catalog_repo.create_brand(db_session, "YN", "Yonex")


@pytest.fixture
def product_type(db_session):
    return catalog_repo.create_product_type(db_session, "RACKET", "Racket")


@pytest.fixture
def make_product(db_session, brand, product_type):

    def _make(product_id: str = "PROD-0001", price: int = 1_500_000):
        return catalog_repo.create_product(
            db_session,
            product_id=product_id,
            name=f"{brand.brand_name} {product_id}",
            price=price,
            brand_pk=brand.id,
            product_type_pk=product_type.id,
        )

    return _make


@pytest.fixture
def product(make_product):
    return make_product()
