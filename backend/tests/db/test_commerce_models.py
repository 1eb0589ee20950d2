"""Cart / order / voucher / feedback / delivery-address entities and their cascades."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError

from storefront.db.model import (
    Cart, CartDetail, DeliveryAddress, Feedback, Order, OrderHistory, OrderStatus, User, Voucher,
)
from storefront.repository import catalog_repo, user_repo


@pytest.fixture
def size(db_session, product_type):
    return catalog_repo.create_size(db_session, "4U", "4U", product_type.id)


@pytest.fixture
def voucher(db_session):
    now = datetime.now(timezone.utc)
    v = Voucher(voucher_id="SALE10", voucher_price=10_000, quantity=3,
                time_start=now - timedelta(days=1), time_end=now + timedelta(days=1))
    db_session.add(v)
    db_session.commit()
    return v


def _count(db, model):
    return db.scalar(select(func.count()).select_from(model))


def test_user_has_one_cart_with_details(db_session, user, product, size):
    cart = Cart(cart_id="CART-1", user_id=user.id)
    cart.cart_details.append(CartDetail(product_id=product.id, size_id=size.id, quantity=2, total_price=3_000_000))
    db_session.add(cart)
    db_session.commit()

    db_session.refresh(user)
    assert user.cart is cart
    assert inspect(User).relationships["cart"].uselist is False
    assert cart.cart_details[0].quantity == 2
    assert cart.total_price == 3_000_000


def test_cart_line_is_unique_per_product_and_size(db_session, user, product, size):
    cart = Cart(cart_id="CART-1", user_id=user.id)
    db_session.add(cart)
    db_session.commit()

    db_session.add(CartDetail(cart_id=cart.id, product_id=product.id, size_id=size.id, total_price=1))
    db_session.commit()
    db_session.add(CartDetail(cart_id=cart.id, product_id=product.id, size_id=size.id, total_price=1))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_order_defaults_and_histories(db_session, user, product, size, voucher):
    order = Order(order_id="ORD-1", user_id=user.id, voucher_id=voucher.id,
                  total_price=1_490_000, payment="COD", delivery_address="1 Le Loi, HCMC")
    order.order_histories.append(
        OrderHistory(product_id=product.id, size_id=size.id, quantity=1, total_price=1_500_000)
    )
    db_session.add(order)
    db_session.commit()
    db_session.refresh(order)

    assert order.status == OrderStatus.PENDING
    assert order.order_histories[0].status_feedback == 0
    assert order.voucher is voucher
    db_session.refresh(user)
    assert [o.order_id for o in user.orders] == ["ORD-1"]


def test_deleting_voucher_keeps_order_and_clears_reference(db_session, user, voucher):
    order = Order(order_id="ORD-1", user_id=user.id, voucher_id=voucher.id,
                  total_price=1, payment="COD", delivery_address="x")
    db_session.add(order)
    db_session.commit()
    order_pk = order.id

    db_session.delete(voucher)
    db_session.commit()
    db_session.expunge_all()

    kept = db_session.get(Order, order_pk)
    assert kept is not None
    assert kept.voucher_id is None


def test_deleting_user_removes_orders_cart_feedback_and_addresses(db_session, user, product, size):
    order = Order(order_id="ORD-1", user_id=user.id, total_price=1, payment="COD", delivery_address="x")
    order.order_histories.append(OrderHistory(product_id=product.id, size_id=size.id, quantity=1, total_price=1))
    db_session.add_all([
        order,
        Cart(cart_id="CART-1", user_id=user.id),
        Feedback(user_id=user.id, product_id=product.id, rating=5, description="Great"),
        DeliveryAddress(user_id=user.id, address="1 Le Loi, HCMC"),
    ])
    db_session.commit()

    assert user_repo.delete_user(db_session, user.id) is True
    db_session.expunge_all()
    for model in (Order, OrderHistory, Cart, Feedback, DeliveryAddress):
        assert _count(db_session, model) == 0


def test_one_feedback_per_user_and_product(db_session, user, make_product):
    first, second = make_product("PROD-A"), make_product("PROD-B")
    db_session.add(Feedback(user_id=user.id, product_id=first.id, rating=4))
    db_session.commit()

    db_session.add(Feedback(user_id=user.id, product_id=first.id, rating=1))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

    db_session.add(Feedback(user_id=user.id, product_id=second.id, rating=1))
    db_session.commit()
    db_session.refresh(first)
    assert [f.rating for f in first.feedbacks] == [4]


def test_voucher_is_active_within_window(voucher):
    now = datetime.now(timezone.utc)
    assert voucher.is_active(now)
    assert not voucher.is_active(now + timedelta(days=2))
