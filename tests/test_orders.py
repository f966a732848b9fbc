import pytest
from sqlalchemy import select

from app.data.models import CartModel, ItemModel, OrderModel, UserModel
from app.domain.errors import NotFoundError
from app.repos.cart_repo import CartRepo
from app.services.order_service import OrderService

from conftest import register, login, bearer


def add(client, headers, item_id, quantity):
    resp = client.post("/carts", json={"item_id": item_id, "quantity": quantity}, headers=headers)
    assert resp.status_code == 200


def test_create_order_from_cart(client, auth_headers, items):
    add(client, auth_headers, items["laptop"], 2)
    add(client, auth_headers, items["mouse"], 1)

    resp = client.post("/orders", headers=auth_headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Order created successfully"

    order = body["order"]
    assert order["status"] == "pending"
    assert order["total"] == pytest.approx(2029.97)
    assert len(order["items"]) == 2
    assert {(i["item"]["name"], i["quantity"], i["price"]) for i in order["items"]} == {
        ("Test Laptop", 2, 999.99),
        ("Test Mouse", 1, 29.99),
    }


def test_total_equals_sum_of_lines(client, auth_headers, items):
    add(client, auth_headers, items["laptop"], 3)
    add(client, auth_headers, items["mouse"], 7)

    order = client.post("/orders", headers=auth_headers).json()["order"]

    assert order["total"] == pytest.approx(sum(i["price"] * i["quantity"] for i in order["items"]))


def test_checkout_consumes_cart(client, auth_headers, items, db):
    add(client, auth_headers, items["laptop"], 1)
    client.post("/orders", headers=auth_headers)

    assert client.get("/carts", headers=auth_headers).status_code == 404
    assert db.execute(select(CartModel)).scalars().all() == []

    # drugi checkout tego samego koszyka nie przejdzie
    assert client.post("/orders", headers=auth_headers).status_code == 404
    assert len(db.execute(select(OrderModel)).scalars().all()) == 1


def test_checkout_without_cart(client, auth_headers, db):
    resp = client.post("/orders", headers=auth_headers)

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Cart not found"
    assert db.execute(select(OrderModel)).scalars().all() == []


def test_checkout_empty_cart(client, auth_headers, db):
    user = db.execute(select(UserModel).where(UserModel.username == "shopper")).scalar_one()
    db.add(CartModel(user_id=user.id))
    db.commit()

    resp = client.post("/orders", headers=auth_headers)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Cart is empty"
    assert db.execute(select(OrderModel)).scalars().all() == []


def test_price_snapshot_survives_catalog_change(client, auth_headers, items, db):
    add(client, auth_headers, items["laptop"], 2)
    client.post("/orders", headers=auth_headers)

    laptop = db.get(ItemModel, items["laptop"])
    laptop.price = 1.0
    db.commit()

    order = client.get("/orders", headers=auth_headers).json()["orders"][0]
    assert order["items"][0]["price"] == pytest.approx(999.99)
    assert order["items"][0]["item"]["price"] == pytest.approx(1.0)
    assert order["total"] == pytest.approx(1999.98)


def test_list_orders_newest_first(client, auth_headers, items):
    add(client, auth_headers, items["laptop"], 1)
    first = client.post("/orders", headers=auth_headers).json()["order"]["id"]
    add(client, auth_headers, items["mouse"], 1)
    second = client.post("/orders", headers=auth_headers).json()["order"]["id"]

    resp = client.get("/orders", headers=auth_headers)

    assert resp.status_code == 200
    assert [o["id"] for o in resp.json()["orders"]] == [second, first]


def test_orders_are_scoped_to_user(client, auth_headers, items):
    add(client, auth_headers, items["laptop"], 1)
    client.post("/orders", headers=auth_headers)

    register(client, "other")
    other = bearer(login(client, "other").json()["token"])

    assert client.get("/orders", headers=other).json()["orders"] == []


def test_failed_checkout_rolls_back(client, auth_headers, items, app, monkeypatch):
    add(client, auth_headers, items["laptop"], 2)

    def boom(self, cart_id):
        raise RuntimeError("crash after order insert")

    monkeypatch.setattr(CartRepo, "delete_cart", boom)

    session = app.state.session_factory()
    try:
        user = session.execute(select(UserModel).where(UserModel.username == "shopper")).scalar_one()
        with pytest.raises(RuntimeError):
            OrderService(session).create_order(user)
    finally:
        session.close()

    check = app.state.session_factory()
    try:
        assert check.execute(select(OrderModel)).scalars().all() == []
        cart = check.execute(select(CartModel)).scalar_one()
        assert [(ci.item_id, ci.quantity) for ci in cart.items] == [(items["laptop"], 2)]
    finally:
        check.close()

    monkeypatch.undo()
    assert client.post("/orders", headers=auth_headers).status_code == 201


def test_stale_cart_cannot_be_checked_out_twice(client, auth_headers, items, app, monkeypatch):
    add(client, auth_headers, items["laptop"], 1)

    # sesja B czyta koszyk zanim sesja A zrobi checkout
    late = app.state.session_factory()
    try:
        late_user = late.execute(select(UserModel).where(UserModel.username == "shopper")).scalar_one()
        stale_cart = CartRepo(late).get_cart_by_user(late_user.id, with_items=True)
        assert stale_cart.items

        first = app.state.session_factory()
        try:
            first_user = first.get(UserModel, late_user.id)
            OrderService(first).create_order(first_user)
        finally:
            first.close()

        monkeypatch.setattr(
            CartRepo, "get_cart_by_user", lambda self, user_id, with_items=False: stale_cart
        )
        with pytest.raises(NotFoundError):
            OrderService(late).create_order(late_user)
    finally:
        late.close()

    monkeypatch.undo()

    check = app.state.session_factory()
    try:
        assert len(check.execute(select(OrderModel)).scalars().all()) == 1
        assert check.execute(select(CartModel)).scalars().all() == []
    finally:
        check.close()
