"""Run the Alembic revision chain against a throwaway SQLite file."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy import inspect, text
from sqlalchemy.exc import IntegrityError

from storefront.db.session import build_engine


pytestmark = pytest.mark.integration

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "storefront" / "db" / "migrations"

BRANDS = "20231106004400"
FAVOURITES = "20231201090000"
HEAD = "20231201180000"

ALL_TABLES = {
    "roles", "users", "brands", "product_types", "products", "favourites",
    "sizes", "product_sizes", "vouchers", "carts", "cart_details",
    "orders", "order_histories", "feedbacks", "delivery_addresses",
}


@pytest.fixture
def migration_engine(tmp_path):
    eng = build_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def alembic_cfg():
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg


def _run(cfg, engine, fn, revision):
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        fn(cfg, revision)


def _tables(engine):
    return set(inspect(engine).get_table_names()) - {"alembic_version"}


def test_revisions_apply_in_timestamp_order(alembic_cfg):
    script = ScriptDirectory.from_config(alembic_cfg)
    chain = [rev.revision for rev in script.walk_revisions()][::-1]
    assert chain == sorted(chain)
    assert chain[0] == "20231106000100"
    assert script.get_current_head() == HEAD
    assert FAVOURITES in chain and len(chain) == len(ALL_TABLES)


def test_upgrade_head_creates_schema(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")

    assert _tables(migration_engine) == ALL_TABLES

    insp = inspect(migration_engine)
    brand_cols = {c["name"]: c for c in insp.get_columns("brands")}
    assert list(brand_cols) == ["id", "brandId", "brandName", "createdAt", "updatedAt"]
    assert all(not brand_cols[name]["nullable"] for name in ("brandId", "brandName", "createdAt", "updatedAt"))

    uniques = {uc["name"]: uc["column_names"] for uc in insp.get_unique_constraints("favourites")}
    assert uniques["unique_user_product_favourite_constraint"] == ["userId", "productId"]

    fks = {fk["constrained_columns"][0]: fk for fk in insp.get_foreign_keys("favourites")}
    assert fks["userId"]["referred_table"] == "users"
    assert fks["productId"]["referred_table"] == "products"
    assert fks["userId"]["options"].get("ondelete") == "CASCADE"


def test_brands_upgrade_then_downgrade_removes_table(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, BRANDS)
    assert "brands" in _tables(migration_engine)

    _run(alembic_cfg, migration_engine, command.downgrade, "20231106000200")
    assert "brands" not in _tables(migration_engine)
    assert {"roles", "users"} <= _tables(migration_engine)


def test_full_downgrade_leaves_empty_schema(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")
    _run(alembic_cfg, migration_engine, command.downgrade, "base")
    assert _tables(migration_engine) == set()


def test_migrated_schema_enforces_favourite_rules(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")

    with migration_engine.begin() as conn:
        conn.execute(text('INSERT INTO roles ("roleId", "roleName") VALUES (\'admin\', \'Administrator\')'))
        conn.execute(text(
            'INSERT INTO users ("userName", password, email, "roleId") VALUES (\'u\', \'x\', \'u@example.com\', 1)'
        ))
        conn.execute(text('INSERT INTO brands ("brandId", "brandName") VALUES (\'YN\', \'Yonex\')'))
        conn.execute(text(
            'INSERT INTO product_types ("productTypeId", "productTypeName") VALUES (\'RACKET\', \'Racket\')'
        ))
        conn.execute(text(
            'INSERT INTO products ("productId", "productTypeId", "brandId", name, price) '
            'VALUES (\'P1\', 1, 1, \'Astrox\', 100), (\'P2\', 1, 1, \'Nanoflare\', 200)'
        ))
        conn.execute(text('INSERT INTO favourites ("userId", "productId") VALUES (1, 1)'))

    with pytest.raises(IntegrityError):
        with migration_engine.begin() as conn:
            conn.execute(text('INSERT INTO favourites ("userId", "productId") VALUES (1, 1)'))

    with migration_engine.begin() as conn:
        conn.execute(text('INSERT INTO favourites ("userId", "productId") VALUES (1, 2)'))
        conn.execute(text("DELETE FROM users WHERE id = 1"))
        remaining = conn.execute(text("SELECT COUNT(*) FROM favourites")).scalar_one()
    assert remaining == 0


def test_brand_id_rejects_duplicates_and_nulls(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, BRANDS)

    with migration_engine.begin() as conn:
        conn.execute(text('INSERT INTO brands ("brandId", "brandName") VALUES (\'ADI\', \'Adidas\')'))

    with pytest.raises(IntegrityError):
        with migration_engine.begin() as conn:
            conn.execute(text('INSERT INTO brands ("brandId", "brandName") VALUES (\'ADI\', \'Again\')'))

    with pytest.raises(IntegrityError):
        with migration_engine.begin() as conn:
            conn.execute(text('INSERT INTO brands ("brandId", "brandName") VALUES (NULL, \'Nobody\')'))


def _seed_catalog(conn):
    conn.execute(text('INSERT INTO roles ("roleId", "roleName") VALUES (\'admin\', \'Administrator\')'))
    conn.execute(text(
        'INSERT INTO users ("userName", password, email, "roleId") VALUES (\'u\', \'x\', \'u@example.com\', 1)'
    ))
    conn.execute(text('INSERT INTO brands ("brandId", "brandName") VALUES (\'YN\', \'Yonex\')'))
    conn.execute(text(
        'INSERT INTO product_types ("productTypeId", "productTypeName") VALUES (\'RACKET\', \'Racket\')'
    ))
    conn.execute(text(
        'INSERT INTO products ("productId", "productTypeId", "brandId", name, price) '
        'VALUES (\'P1\', 1, 1, \'Astrox\', 100)'
    ))


def test_migrated_favourites_follow_primary_key_updates(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")

    with migration_engine.begin() as conn:
        _seed_catalog(conn)
        conn.execute(text('INSERT INTO favourites ("userId", "productId") VALUES (1, 1)'))

    with migration_engine.begin() as conn:
        conn.execute(text("UPDATE users SET id = 42 WHERE id = 1"))
        conn.execute(text("UPDATE products SET id = 77 WHERE id = 1"))
        rows = conn.execute(text('SELECT "userId", "productId" FROM favourites')).all()
    assert [tuple(r) for r in rows] == [(42, 77)]

    fks = {fk["constrained_columns"][0]: fk for fk in inspect(migration_engine).get_foreign_keys("favourites")}
    assert fks["userId"]["options"].get("onupdate") == "CASCADE"
    assert fks["productId"]["options"].get("onupdate") == "CASCADE"


def test_migrated_commerce_tables(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")
    insp = inspect(migration_engine)

    uniques = {
        table: {uc["name"]: uc["column_names"] for uc in insp.get_unique_constraints(table)}
        for table in ("product_sizes", "cart_details", "order_histories", "feedbacks")
    }
    assert uniques["product_sizes"]["unique_product_size_constraint"] == ["productId", "sizeId"]
    assert uniques["cart_details"]["unique_cart_product_size_constraint"] == ["cartId", "productId", "sizeId"]
    assert uniques["order_histories"]["unique_order_product_size_constraint"] == ["orderId", "productId", "sizeId"]
    assert uniques["feedbacks"]["unique_user_product_feedback_constraint"] == ["userId", "productId"]

    order_fks = {fk["constrained_columns"][0]: fk for fk in insp.get_foreign_keys("orders")}
    assert order_fks["voucherId"]["referred_table"] == "vouchers"
    assert order_fks["voucherId"]["options"].get("ondelete") == "SET NULL"

    with migration_engine.begin() as conn:
        _seed_catalog(conn)
        conn.execute(text(
            'INSERT INTO feedbacks ("userId", "productId", rating) VALUES (1, 1, 5)'
        ))

    with pytest.raises(IntegrityError):
        with migration_engine.begin() as conn:
            conn.execute(text('INSERT INTO feedbacks ("userId", "productId", rating) VALUES (1, 1, 3)'))


def test_sizes_downgrade_removes_only_later_tables(alembic_cfg, migration_engine):
    _run(alembic_cfg, migration_engine, command.upgrade, "head")
    _run(alembic_cfg, migration_engine, command.downgrade, FAVOURITES)
    assert _tables(migration_engine) == {"roles", "users", "brands", "product_types", "products", "favourites"}
