from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.crud.course import course as crud_course
from tests.helpers.asserts import api_call, assert_error
from tests.helpers.factories import create_course, create_instructor, create_module, degree_payload


class CallCounter:
    def __init__(self, wrapped):
        self.wrapped = wrapped
        self.count = 0

    def __call__(self, *args, **kwargs):
        self.count += 1
        return self.wrapped(*args, **kwargs)


def test_second_list_is_served_from_cache(client: TestClient, user_headers, db_session: Session, monkeypatch):
    create_course(db_session)
    counter = CallCounter(crud_course.get_multi)
    monkeypatch.setattr(crud_course, "get_multi", counter)

    first = api_call(client, "GET", "/course/allCourse?limit=1&skip=0", headers=user_headers)
    second = api_call(client, "GET", "/course/allCourse?limit=1&skip=0", headers=user_headers)

    assert first.headers["X-Cache-Status"] == "MISS"
    assert second.headers["X-Cache-Status"] == "HIT"
    assert first.json() == second.json()
    assert counter.count == 1


def test_pages_are_cached_separately(client: TestClient, user_headers, db_session: Session):
    instructor = create_instructor(db_session)
    create_course(db_session, instructor, name="course one")
    create_course(db_session, instructor, name="course two")

    page_one = api_call(client, "GET", "/course/allCourse?limit=1&skip=0", headers=user_headers).json()["data"]
    page_two = api_call(client, "GET", "/course/allCourse?limit=1&skip=1", headers=user_headers)

    assert page_two.headers["X-Cache-Status"] == "MISS"
    assert page_two.json()["data"][0]["id"] != page_one[0]["id"]


def test_filtered_list_never_uses_unfiltered_entry(client: TestClient, user_headers, db_session: Session):
    instructor = create_instructor(db_session)
    create_course(db_session, instructor, name="course one", organization="acme")
    create_course(db_session, instructor, name="course two", organization="globex")

    unfiltered = api_call(client, "GET", "/course/allCourse", headers=user_headers).json()["data"]
    assert len(unfiltered) == 2

    filtered = api_call(
        client, "GET", "/course/allCourse", headers=user_headers, params={"filter": '{"organization": "globex"}'}
    )

    assert filtered.headers["X-Cache-Status"] == "MISS"
    assert [c["name"] for c in filtered.json()["data"]] == ["course two"]


def test_create_invalidates_cached_lists(client: TestClient, admin_headers, db_session: Session):
    api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload(name="First degree"))
    api_call(client, "GET", "/degree/allDegrees", headers=admin_headers)

    api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload(name="Second degree"))
    response = api_call(client, "GET", "/degree/allDegrees", headers=admin_headers)

    assert response.headers["X-Cache-Status"] == "MISS"
    assert {d["name"] for d in response.json()["data"]} == {"First degree", "Second degree"}


def test_update_patches_cached_unfiltered_page(client: TestClient, admin_headers):
    created = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]
    api_call(client, "GET", "/degree/allDegrees", headers=admin_headers)

    api_call(client, "PATCH", f"/degree/{created['id']}", headers=admin_headers, json={"duration": "3 years"})
    response = api_call(client, "GET", "/degree/allDegrees", headers=admin_headers)

    assert response.headers["X-Cache-Status"] == "HIT"
    assert response.json()["data"][0]["duration"] == "3 years"


def test_update_drops_cached_filtered_pages(client: TestClient, admin_headers):
    created = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]
    level_filter = {"filter": '{"level": "Undergraduate"}'}
    api_call(client, "GET", "/degree/allDegrees", headers=admin_headers, params=level_filter)

    api_call(client, "PATCH", f"/degree/{created['id']}", headers=admin_headers, json={"level": "Graduate"})
    response = client.get("/degree/allDegrees", headers=admin_headers, params=level_filter)

    assert response.status_code == 404


def test_delete_invalidates_cached_pages(client: TestClient, admin_headers):
    names = ["First degree", "Second degree", "Third degree"]
    created = [
        api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload(name=name)).json()["data"]
        for name in names
    ]
    first_page = api_call(client, "GET", "/degree/allDegrees?limit=2&skip=0", headers=admin_headers).json()["data"]
    api_call(client, "GET", "/degree/allDegrees?limit=2&skip=2", headers=admin_headers)

    deleted_id = first_page[0]["id"]
    api_call(client, "DELETE", f"/degree/{deleted_id}", headers=admin_headers)
    refreshed = api_call(client, "GET", "/degree/allDegrees?limit=2&skip=0", headers=admin_headers)
    next_page = client.get("/degree/allDegrees?limit=2&skip=2", headers=admin_headers)

    assert refreshed.headers["X-Cache-Status"] == "MISS"
    remaining = {d["id"] for d in created} - {deleted_id}
    assert {d["id"] for d in refreshed.json()["data"]} == remaining
    assert_error(next_page, 404, "NOT_FOUND")


def test_topic_writes_refresh_cached_module_pages(client: TestClient, admin_headers, db_session: Session):
    module = create_module(db_session)
    api_call(client, "GET", "/module/allModules", headers=admin_headers)

    topic = api_call(
        client, "POST", "/topic/addTopic", headers=admin_headers, json={"title": "Variables", "module": module.id}
    ).json()["data"]
    after_create = api_call(client, "GET", "/module/allModules", headers=admin_headers)

    assert after_create.headers["X-Cache-Status"] == "MISS"
    assert after_create.json()["data"][0]["topic_ids"] == [topic["id"]]

    api_call(client, "DELETE", f"/topic/{topic['id']}", headers=admin_headers)
    after_delete = api_call(client, "GET", "/module/allModules", headers=admin_headers)

    assert after_delete.headers["X-Cache-Status"] == "MISS"
    assert after_delete.json()["data"][0]["topic_ids"] == []
