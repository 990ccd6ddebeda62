import os
from datetime import date

import pytest
from fastapi.testclient import TestClient

from dashboard.auth import hash_password
from dashboard.cache import ViewCache
from dashboard.db.engine import get_engine
from dashboard.db.schema import customers, invoices, metadata, users
from dashboard.main import create_app


@pytest.fixture
def engine(tmp_path):
    engine = get_engine(f"sqlite:///{os.path.join(tmp_path, 'dashboard.sqlite')}")
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def cache():
    return ViewCache()


@pytest.fixture
def client(engine, cache):
    return TestClient(create_app(engine=engine, cache=cache))


@pytest.fixture
def customer_id(engine):
    with engine.begin() as conn:
        result = conn.execute(
            customers.insert().values(
                name="Delba de Oliveira",
                email="delba@oliveira.com",
                image_url="https://example.com/delba.png",
            )
        )
    return result.inserted_primary_key[0]


@pytest.fixture
def user(engine):
    with engine.begin() as conn:
        conn.execute(
            users.insert().values(
                name="User",
                email="user@nextmail.com",
                password=hash_password("123456"),
            )
        )
    return {"email": "user@nextmail.com", "password": "123456"}


@pytest.fixture
def fetch_rows(engine):
    def fetch(table):
        with engine.connect() as conn:
            return [dict(row) for row in conn.execute(table.select()).mappings()]

    return fetch


@pytest.fixture
def make_invoice(engine):
    def make(customer_id, amount=1500, status="pending", on_date=date(2024, 1, 15)):
        with engine.begin() as conn:
            result = conn.execute(
                invoices.insert().values(
                    customer_id=customer_id,
                    amount=amount,
                    status=status,
                    date=on_date,
                )
            )
        return result.inserted_primary_key[0]

    return make
