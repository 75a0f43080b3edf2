from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.helpers.asserts import api_call, assert_error
from tests.helpers.factories import create_course, create_instructor


def _payload(**overrides):
    data = {
        "external_id": "inst-001",
        "name": "Alan Turing",
        "image": "https://cdn.catalog.io/instructors/alan.png",
        "job": "Mathematician",
        "courses_title": ["Computability"],
        "social_media": {"linkedin": "https://linkedin.com/in/alan"},
        "description": "Breaks codes.",
    }
    data.update(overrides)
    return data


def test_add_instructor(client: TestClient, admin_headers):
    response = api_call(client, "POST", "/instructor/addInstructor", headers=admin_headers, json=_payload())

    data = response.json()["data"]
    assert data["external_id"] == "inst-001"
    assert data["social_media"]["linkedin"] == "https://linkedin.com/in/alan"


def test_add_instructor_duplicate_external_id(client: TestClient, admin_headers):
    api_call(client, "POST", "/instructor/addInstructor", headers=admin_headers, json=_payload())
    response = client.post("/instructor/addInstructor", headers=admin_headers, json=_payload(name="Someone Else"))
    assert_error(response, 400, "VALIDATION_ERROR")


def test_add_instructor_multipart_with_nested_fields(client: TestClient, admin_headers):
    form = {
        "external_id": "inst-002",
        "name": "Barbara Liskov",
        "courses_title": '["Abstraction"]',
        "social_media": '{"linkedin": "https://linkedin.com/in/barbara"}',
    }

    response = api_call(
        client, "POST", "/instructor/addInstructor", headers=admin_headers,
        data=form, files={"image": ("barbara.png", b"png-bytes", "image/png")},
    )

    data = response.json()["data"]
    assert data["courses_title"] == ["Abstraction"]
    assert data["image"].startswith("/uploads/")


def test_update_instructor(client: TestClient, admin_headers):
    created = api_call(client, "POST", "/instructor/addInstructor", headers=admin_headers, json=_payload()).json()["data"]

    response = api_call(
        client, "PATCH", f"/instructor/{created['id']}", headers=admin_headers, json={"job": "Professor"}
    )

    assert response.json()["data"]["job"] == "Professor"


def test_delete_instructor_with_courses_is_refused(client: TestClient, admin_headers, db_session: Session):
    instructor = create_instructor(db_session)
    first = create_course(db_session, instructor=instructor, name="python basics")
    second = create_course(db_session, instructor=instructor, name="python advanced")

    response = client.delete(f"/instructor/{instructor.id}", headers=admin_headers)

    assert_error(response, 400, "VALIDATION_ERROR")
    assert response.json()["error"]["details"]["course_ids"] == sorted([first.course_id, second.course_id])
    api_call(client, "GET", f"/instructor/{instructor.id}", headers=admin_headers)
    api_call(client, "GET", f"/course/{first.course_id}", headers=admin_headers)


def test_delete_instructor_without_courses(client: TestClient, admin_headers, db_session: Session):
    instructor = create_instructor(db_session)
    api_call(client, "GET", "/instructor/allInstructors", headers=admin_headers)

    api_call(client, "DELETE", f"/instructor/{instructor.id}", headers=admin_headers)

    assert_error(client.get(f"/instructor/{instructor.id}", headers=admin_headers), 404, "NOT_FOUND")
    assert_error(client.get("/instructor/allInstructors", headers=admin_headers), 404, "NOT_FOUND")
