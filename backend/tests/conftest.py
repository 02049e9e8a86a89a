import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from projecthub.database import Base, get_db
from projecthub.main import app
from projecthub.models.project import Project
from projecthub.models.user import User
from projecthub.services.identity_service import create_access_token

TEST_DB_URL = "sqlite:///./test_projecthub.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "alice": User(uid="uid-alice", email="alice@example.com", display_name="Alice", photo_url="", bio=""),
        "bob": User(uid="uid-bob", email="bob@example.com", display_name="Bob", photo_url="", bio=""),
        "carol": User(uid="uid-carol", email="carol@example.com", display_name="Carol", photo_url="", bio=""),
    }
    for u in users.values():
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def make_project(db, author, title="Project", description="Description", tags=None, **kwargs):
    project = Project(
        title=title,
        description=description,
        github_link=kwargs.pop("github_link", "https://github.com/example/repo"),
        live_link=kwargs.pop("live_link", ""),
        author_id=author.user_id,
        author_name=author.display_name,
        **kwargs,
    )
    project.tags = tags or []
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


@pytest.fixture
def seed_project(db, seed_users):
    return make_project(
        db,
        seed_users["alice"],
        title="Rust Ray Tracer",
        description="A weekend ray tracer",
        tags=["rust", "graphics"],
    )


def auth_headers(uid: str, **claims) -> dict:
    return {"Authorization": f"Bearer {create_access_token(uid, **claims)}"}
