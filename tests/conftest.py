import sys
import os
import tempfile
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-catalog")
os.environ["REDIS_URL"] = ""
os.environ.setdefault("UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "catalog-test-uploads"))
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "catalog-test-logs"))

import asyncio
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from app.core.cache import cache
from app.core.config import settings
from app.core.constants import RoleEnum
from app.core.database import Base, get_db
from app.core.security import get_password_hash
from app.crud.user import user as crud_user
import app.models  # noqa: F401
import main

from tests.helpers.factories import DEFAULT_PASSWORD

test_db_url = settings.TEST_DATABASE_URL or "sqlite:///./test.db"

@pytest.fixture(scope="session")
def database_engine():
    if test_db_url.startswith("sqlite"):
        engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    else:
        engine = create_engine(test_db_url)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
    if test_db_url == "sqlite:///./test.db" and os.path.exists("./test.db"):
        os.remove("./test.db")

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()

@pytest.fixture(autouse=True)
def clear_cache():
    asyncio.run(cache.clear())
    yield
    asyncio.run(cache.clear())

@pytest.fixture(scope="function")
def client(db_session):
    # Re-initialize the app for each test function to ensure a clean state
    from importlib import reload
    reload(main)
    main.app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(main.app) as test_client:
        yield test_client

@pytest.fixture
def user_factory(db_session):
    def _user_factory(email=None, password=DEFAULT_PASSWORD, role=RoleEnum.USER, is_confirmed=True):
        user_data = {
            "username": f"user-{uuid.uuid4().hex[:8]}",
            "email": email or f"user-{uuid.uuid4().hex[:8]}@catalog.io",
            "first_name": "Test",
            "last_name": "User",
            "hashed_password": get_password_hash(password),
            "role": role.value,
            "is_confirmed": is_confirmed,
        }
        return crud_user.create(db_session, obj_in=user_data)
    return _user_factory

@pytest.fixture
def login(client):
    def _login(email, password=DEFAULT_PASSWORD):
        response = client.post("/auth/login", json={"email": email, "password": password})
        body = response.json()
        token = body.get("data", {}).get("token", {}).get("access_token")
        assert token, f"Login failed or token missing: {body}"
        return token
    return _login

@pytest.fixture
def admin_user(user_factory):
    return user_factory(role=RoleEnum.ADMIN)

@pytest.fixture
def regular_user(user_factory):
    return user_factory()

@pytest.fixture
def admin_token(admin_user, login):
    return login(admin_user.email)

@pytest.fixture
def user_token(regular_user, login):
    return login(regular_user.email)

@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}

@pytest.fixture
def user_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}
