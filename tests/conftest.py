import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from foodtoday.database import Base, get_db, init_db
from foodtoday.main import app
from foodtoday.services import external

fake = Faker()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """External recipe lookups return nothing unless a test says otherwise."""
    monkeypatch.setattr(external, "_get_json", lambda path, params: None)


def register_user(client, **overrides):
    payload = {
        "name": fake.name(),
        "email": fake.unique.email(),
        "password": fake.password(length=12),
    }
    payload.update(overrides)
    resp = client.post("/api/auth/register", json=payload)
    assert resp.status_code == 201, resp.text
    data = resp.json()
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def user_and_headers(client):
    return register_user(client)


@pytest.fixture
def auth_headers(user_and_headers):
    return user_and_headers[1]


@pytest.fixture
def seeded(db_session):
    from foodtoday.seed import seed_database

    return seed_database(db_session)


@pytest.fixture
def demo_headers(client, seeded):
    from foodtoday.seed import DEMO_EMAIL, DEMO_PASSWORD

    resp = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}
