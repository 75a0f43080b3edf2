from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_error
from tests.helpers.factories import success_story_payload


def test_add_success_story(client: TestClient, admin_headers, user_headers):
    created = api_call(
        client, "POST", "/successStory/addSuccessStory", headers=admin_headers, json=success_story_payload()
    ).json()["data"]
    assert created["person_image"] == "https://cdn.catalog.io/stories/grace.png"

    fetched = api_call(client, "GET", f"/successStory/{created['id']}", headers=user_headers).json()["data"]
    assert fetched["name"] == "Grace Hopper"


def test_add_success_story_without_image(client: TestClient, admin_headers):
    payload = success_story_payload()
    del payload["person_image"]
    response = client.post("/successStory/addSuccessStory", headers=admin_headers, json=payload)
    body = assert_error(response, 400, "VALIDATION_ERROR")
    assert body["error"]["message"] == "Image is required (file or URL)"


def test_get_unknown_success_story(client: TestClient, user_headers):
    assert_error(client.get(f"/successStory/{'d' * 32}", headers=user_headers), 404, "NOT_FOUND")
