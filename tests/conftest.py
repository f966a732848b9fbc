import os

# szybki bcrypt w testach, musi byc ustawione przed importem app.*
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.data.database import build_engine
from app.data.models import ItemModel
from app.main import create_app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine, seed=False)


@pytest.fixture
def client(app):
    # with -> odpala lifespan (create_all)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def items(db):
    laptop = ItemModel(name="Test Laptop", description="Test laptop", price=999.99)
    mouse = ItemModel(name="Test Mouse", description="Test mouse", price=29.99)
    db.add_all([laptop, mouse])
    db.commit()
    return {"laptop": laptop.id, "mouse": mouse.id}


def register(client, username="testuser", email=None, password="password123"):
    return client.post(
        "/users",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )


def login(client, username="testuser", password="password123"):
    return client.post("/users/login", json={"username": username, "password": password})


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    register(client, "shopper")
    resp = login(client, "shopper")
    assert resp.status_code == 200
    return bearer(resp.json()["token"])
