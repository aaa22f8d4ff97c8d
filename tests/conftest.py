import mongomock
import pytest
from fastapi.testclient import TestClient

import database
import main
from schemas import ADMIN_CREDENTIAL
from security import hash_password

ADMIN_USER = "magdy"
ADMIN_PASS = "correct horse battery staple"


@pytest.fixture
def store(monkeypatch):
    db = mongomock.MongoClient()["portfolio_test"]
    monkeypatch.setattr(database, "db", db)
    return db


@pytest.fixture
def client(store):
    return TestClient(main.app)


@pytest.fixture
def no_store(monkeypatch):
    monkeypatch.setattr(database, "db", None)


@pytest.fixture
def admin(store):
    store[ADMIN_CREDENTIAL].insert_one({"username": ADMIN_USER, "password_hash": hash_password(ADMIN_PASS)})
    return {"username": ADMIN_USER, "password": ADMIN_PASS}


@pytest.fixture
def auth_headers(client, admin):
    res = client.post("/api/auth/login", json=admin)
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}
