import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database import get_db
from app.database.base_class import Base
from app.database.session import get_engine
from app.main import app
from app.model.questions import Question
from app.model.users import User
from app.router.api.logics.auth_logic import issue_token

engine = get_engine("sqlite://")
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(name=None, points=0, is_admin=False):
        counter["n"] += 1
        user = User(
            name=name or f"Player {counter['n']}",
            email=f"player{counter['n']}@example.com",
            hashed_password="not-a-real-hash",
            points=points,
            is_admin=is_admin,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def auth_headers(user):
    token = issue_token(user)
    return {"Authorization": f"Bearer {token.access_token}"}


@pytest.fixture
def headers_for():
    return auth_headers


@pytest.fixture
def user(make_user):
    return make_user(name="Alice")


@pytest.fixture
def user_headers(user):
    return auth_headers(user)


@pytest.fixture
def admin_headers(make_user):
    return auth_headers(make_user(name="Admin", is_admin=True))


@pytest.fixture
def questions(db):
    rows = [
        Question(question="What is the capital of France?", option_a="London", option_b="Berlin",
                 option_c="Paris", option_d="Madrid", correct_answer="C"),
        Question(question="What is the chemical symbol for water?", option_a="H2O", option_b="CO2",
                 option_c="O2", option_d="NaCl", correct_answer="A"),
        Question(question="How many continents are there?", option_a="5", option_b="6",
                 option_c="7", option_d="8", correct_answer="C"),
    ]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows
