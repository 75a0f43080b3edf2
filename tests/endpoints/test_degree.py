from pathlib import Path

from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_error
from tests.helpers.factories import degree_payload


def test_add_degree(client: TestClient, admin_headers):
    response = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload())

    data = response.json()["data"]
    assert response.status_code == 201
    assert data["link"] == "https://university.catalog.io/cs"
    assert data["img"] == "https://cdn.catalog.io/degrees/cs.png"


def test_add_degree_with_uploaded_image(client: TestClient, admin_headers):
    payload = degree_payload()
    del payload["img"]

    response = api_call(
        client, "POST", "/degree/addDegree", headers=admin_headers,
        data=payload, files={"image": ("cs.jpg", b"jpeg-bytes", "image/jpeg")},
    )

    assert response.json()["data"]["img"].startswith("/uploads/")


def test_add_degree_rejects_invalid_link(client: TestClient, admin_headers):
    response = client.post("/degree/addDegree", headers=admin_headers, json=degree_payload(link="nope"))
    assert_error(response, 400, "VALIDATION_ERROR")


def test_degree_crud_round(client: TestClient, admin_headers, user_headers):
    created = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]

    listed = api_call(client, "GET", "/degree/allDegrees", headers=user_headers).json()["data"]
    assert [d["id"] for d in listed] == [created["id"]]

    updated = api_call(
        client, "PATCH", f"/degree/{created['id']}", headers=admin_headers, json={"level": "Graduate"}
    ).json()["data"]
    assert updated["level"] == "Graduate"

    assert_error(client.patch(f"/degree/{created['id']}", headers=user_headers, json={"level": "x"}), 403)

    api_call(client, "DELETE", f"/degree/{created['id']}", headers=admin_headers)
    assert_error(client.get("/degree/allDegrees", headers=user_headers), 404)


def test_update_degree_with_form_body(client: TestClient, admin_headers):
    created = api_call(client, "POST", "/degree/addDegree", headers=admin_headers, json=degree_payload()).json()["data"]

    response = api_call(
        client, "PATCH", f"/degree/{created['id']}", headers=admin_headers,
        data={"level": "Graduate"}, files={"image": ("cs2.png", b"png-bytes", "image/png")},
    )

    data = response.json()["data"]
    assert data["level"] == "Graduate"
    assert data["img"].startswith("/uploads/")


def test_add_degree_upload_write_failure(client: TestClient, admin_headers, monkeypatch):
    def boom(self, data):
        raise OSError("No space left on device")

    monkeypatch.setattr(Path, "write_bytes", boom)
    payload = degree_payload()
    del payload["img"]

    response = client.post(
        "/degree/addDegree", headers=admin_headers,
        data=payload, files={"image": ("cs.jpg", b"jpeg-bytes", "image/jpeg")},
    )

    assert_error(response, 500, "INTERNAL_SERVER_ERROR")
    assert response.json()["error"]["message"] == "Failed to upload image"
