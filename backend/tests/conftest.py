"""Shared fixtures: in-memory database, API client and authenticated trainers."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ptcoach.database import Base, get_db
from ptcoach.main import app
from ptcoach.models import Client, Trainer


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(session_factory):
    """TestClient wired to the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_trainer(api, email="coach@example.com", name="Coach"):
    response = api.post(
        "/api/v1/auth/register",
        json={"email": email, "password": "s3cret-pass", "name": name},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def create_client(api, headers, name="Alex"):
    response = api.post(
        "/api/v1/clients/",
        headers=headers,
        json={
            "name": name,
            "age": 32,
            "gender": "female",
            "experience": "intermediate",
            "goals": "strength",
            "trainingFrequency": 4,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(api):
    return register_trainer(api)


@pytest.fixture
def client_id(api, auth_headers):
    return create_client(api, auth_headers)["id"]


@pytest.fixture
def trainer(db):
    trainer = Trainer(email="orm@example.com", name="ORM Coach", hashed_password="not-a-hash")
    db.add(trainer)
    db.commit()
    db.refresh(trainer)
    return trainer


@pytest.fixture
def client_row(db, trainer):
    client = Client(
        trainer_id=trainer.id,
        name="Sam",
        age=41,
        gender="male",
        experience="beginner",
        goals="fat_loss",
        training_frequency=3,
    )
    db.add(client)
    db.commit()
    db.refresh(client)
    return client
