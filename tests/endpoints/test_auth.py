from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.crud.user import user as crud_user
from tests.helpers.asserts import api_call, assert_error


def _signup_payload(**overrides):
    data = {
        "username": "  NewLearner ",
        "email": "New.Learner@Catalog.io",
        "password": "supersecret",
        "first_name": "New",
        "last_name": "Learner",
    }
    data.update(overrides)
    return data


def test_signup_creates_unconfirmed_user(client: TestClient, db_session: Session):
    response = api_call(client, "POST", "/auth/signup", json=_signup_payload())

    data = response.json()["data"]
    assert response.status_code == 201
    assert data["username"] == "newlearner"
    assert data["role"] == "user"
    assert data["is_confirmed"] is False
    assert "hashed_password" not in data

    stored = crud_user.get_by_email(db_session, email="new.learner@catalog.io")
    assert stored is not None


def test_signup_duplicate_email(client: TestClient):
    api_call(client, "POST", "/auth/signup", json=_signup_payload())
    response = client.post("/auth/signup", json=_signup_payload(username="other"))
    assert_error(response, 400, "VALIDATION_ERROR")


def test_signup_short_password(client: TestClient):
    response = client.post("/auth/signup", json=_signup_payload(password="short"))
    assert_error(response, 400, "VALIDATION_ERROR")


def test_login_and_me(client: TestClient):
    api_call(client, "POST", "/auth/signup", json=_signup_payload())

    login = api_call(client, "POST", "/auth/login", json={"email": "new.learner@catalog.io", "password": "supersecret"})
    token = login.json()["data"]["token"]["access_token"]

    me = api_call(client, "GET", "/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.json()["data"]["email"] == "new.learner@catalog.io"


def test_login_wrong_password(client: TestClient, regular_user):
    response = client.post("/auth/login", json={"email": regular_user.email, "password": "wrong-password"})
    assert_error(response, 401, "UNAUTHORIZED")


def test_invalid_token_rejected(client: TestClient):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert_error(response, 401, "UNAUTHORIZED")
