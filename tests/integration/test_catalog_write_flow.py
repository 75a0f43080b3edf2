from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import RoleEnum
from app.crud.notification import notification as crud_notification
from app.models.course import Course
from tests.helpers.asserts import api_call, assert_error
from tests.helpers.factories import (
    COURSE_DESCRIPTION, create_course, create_instructor, degree_payload, notifications_titled, recipients_of,
)


def test_created_entity_appears_in_cold_list(client: TestClient, admin_headers):
    created = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]

    listed = api_call(client, "GET", "/degree/allDegrees", headers=admin_headers).json()["data"]

    assert created["id"] in {d["id"] for d in listed}


def test_add_course_with_uploaded_image(client: TestClient, admin_headers, db_session: Session):
    instructor = create_instructor(db_session)
    form = {"name": "Uploaded Course", "description": COURSE_DESCRIPTION, "instructor": instructor.id}

    first = api_call(
        client, "POST", "/course/addCourse", headers=admin_headers,
        data=form, files={"image": ("cover.png", b"\x89PNG\r\n", "image/png")},
    )
    second = api_call(
        client, "POST", "/course/addCourse", headers=admin_headers,
        data={**form, "name": "Second Upload"}, files={"image": ("cover.png", b"\x89PNG\r\n", "image/png")},
    )

    assert first.status_code == 201
    image = first.json()["data"]["image"]
    assert image.startswith("/uploads/") and image.endswith(".png")
    assert (Path(settings.UPLOAD_DIR) / image.rsplit("/", 1)[1]).read_bytes() == b"\x89PNG\r\n"
    assert second.json()["data"]["course_id"] == first.json()["data"]["course_id"] + 1
    assert db_session.query(Course).count() == 2


def test_image_url_in_body_wins_over_upload(client: TestClient, admin_headers, db_session: Session):
    instructor = create_instructor(db_session)
    form = {
        "name": "Linked Course",
        "description": COURSE_DESCRIPTION,
        "instructor": instructor.id,
        "image": "https://cdn.catalog.io/courses/linked.png",
    }

    response = api_call(
        client, "POST", "/course/addCourse", headers=admin_headers,
        data=form, files={"image": ("cover.png", b"bytes", "image/png")},
    )

    assert response.json()["data"]["image"] == "https://cdn.catalog.io/courses/linked.png"


def test_course_update_notifications(client: TestClient, admin_headers, admin_user, user_factory, db_session: Session):
    second_admin = user_factory(role=RoleEnum.ADMIN)
    course = create_course(db_session)

    api_call(client, "PATCH", f"/course/{course.course_id}", headers=admin_headers, json={"organization": "Catalog"})
    assert notifications_titled(db_session, "Course Updated") == []

    api_call(client, "PATCH", f"/course/{course.course_id}", headers=admin_headers, json={"name": "Python Mastery"})
    sent = notifications_titled(db_session, "Course Updated")
    assert len(sent) == 1
    assert sent[0].body == (
        'The course "python mastery" has been updated: '
        'Title changed from "python basics" to "python mastery".'
    )
    assert sorted(recipients_of(db_session, "Course Updated")) == sorted([admin_user.id, second_admin.id])


def test_course_create_notification_names_instructor(client: TestClient, admin_headers, db_session: Session):
    instructor = create_instructor(db_session, name="Edsger Dijkstra")
    api_call(client, "POST", "/course/addCourse", headers=admin_headers, json={
        "name": "Structured Programming",
        "description": COURSE_DESCRIPTION,
        "instructor": instructor.id,
        "image": "https://cdn.catalog.io/courses/structured.png",
    })

    sent = notifications_titled(db_session, "New Course Added")
    assert sent[0].body == 'A new course "structured programming" by Edsger Dijkstra has been added to our collection.'


def test_failing_notification_store_does_not_fail_requests(client: TestClient, admin_headers, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationalError("INSERT INTO notifications", {}, Exception("database is locked"))

    monkeypatch.setattr(crud_notification, "create_multi", boom)

    created = client.post("/degree/addDegree", headers=admin_headers, json=degree_payload())
    assert created.status_code == 201, created.text

    degree_id = created.json()["data"]["id"]
    updated = client.patch(f"/degree/{degree_id}", headers=admin_headers, json={"name": "Renamed Degree"})
    assert updated.status_code == 200, updated.text
    assert updated.json()["data"]["name"] == "Renamed Degree"


def test_sequential_degree_updates_last_write_wins(client: TestClient, admin_headers, db_session: Session):
    degree_id = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]["id"]
    first_body = {"name": "Physics", "level": "Graduate"}
    second_body = {"name": "Chemistry", "level": "Doctorate"}

    api_call(client, "PATCH", f"/degree/{degree_id}", headers=admin_headers, json=first_body)
    api_call(client, "PATCH", f"/degree/{degree_id}", headers=admin_headers, json=second_body)

    final = api_call(client, "GET", f"/degree/{degree_id}", headers=admin_headers).json()["data"]
    assert {k: final[k] for k in second_body} == second_body
    assert len(notifications_titled(db_session, "Degree Updated")) == 2


@pytest.mark.parametrize("path", [
    "/course/987",
    f"/module/{'0' * 32}",
    f"/topic/{'0' * 32}",
    f"/degree/{'0' * 32}",
    f"/instructor/{'0' * 32}",
    f"/careerResource/{'0' * 32}",
    f"/careerResourceCategories/{'0' * 32}",
    f"/successStory/{'0' * 32}",
])
def test_delete_nonexistent_is_not_found(client: TestClient, admin_headers, path):
    assert_error(client.delete(path, headers=admin_headers), 404, "NOT_FOUND")
