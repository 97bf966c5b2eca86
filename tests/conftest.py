import os

# La app se importa contra SQLite en memoria, nunca contra Postgres
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import debt_ledger.models  # noqa: F401
from debt_ledger.database import get_session
from debt_ledger.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_debt(client):
    def _create(name="Ana", amount=100, type_="me_deben"):
        response = client.post("/api/debts/", json={"name": name, "amount": amount, "type": type_})
        assert response.status_code in (200, 201), response.text
        return response.json()

    return _create
