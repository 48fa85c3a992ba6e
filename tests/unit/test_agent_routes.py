"""Unit tests for the agent creation API."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_client_factory
from app.main import URL_PREFIX, app
from core.errors import RemoteOperationError, UnexpectedError

AGENTS_URL = f"{URL_PREFIX}/agents"


@pytest.fixture
def remote(make_client):
    client = make_client()
    app.dependency_overrides[get_client_factory] = lambda: client.factory
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def http():
    with TestClient(app) as test_client:
        yield test_client


class TestCreateAgent:
    """Tests for POST /agents."""

    def test_success(self, remote, http):
        response = http.post(AGENTS_URL, json={
            "description": "Answer coffee shop questions",
            "name": "Coffee Bot",
            "api_key": "sk_test_123",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["data"]["assistant_id"] == "a1"
        assert body["data"]["phone_number_id"] == "p1"
        assert body["data"]["phone_number"] == "+14155551234"
        assert body["data"]["agent_name"] == "Coffee Bot"
        assert body["data"]["state"] == "complete"
        assert [step["status"] for step in body["data"]["steps"]] == ["completed"] * 3
        assert remote.credentials == ["sk_test_123"]

    def test_bearer_token_is_used_without_api_key(self, remote, http):
        response = http.post(
            AGENTS_URL,
            json={"description": "Answer coffee shop questions"},
            headers={"Authorization": "Bearer sk_from_header"},
        )

        assert response.status_code == 201
        assert response.json()["data"]["agent_name"] == "VAPI Agent"
        assert remote.credentials == ["sk_from_header"]

    def test_missing_credential(self, remote, http):
        response = http.post(AGENTS_URL, json={"description": "Answer coffee shop questions"})

        assert response.status_code == 422
        body = response.json()
        assert body["error_code"] == "validation_error"
        assert body["message"] == "Please fill in all required fields"
        assert body["details"]["state"] == "idle"
        assert remote.calls == []

    def test_remote_failure(self, remote, http):
        remote.failures["purchase_phone_number"] = RemoteOperationError(
            "purchase phone number", 402, "quota exceeded"
        )

        response = http.post(AGENTS_URL, json={
            "description": "Answer coffee shop questions",
            "api_key": "sk_test_123",
        })

        assert response.status_code == 502
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "quota exceeded"
        assert body["error_code"] == "remote_operation_error"
        assert body["details"]["state"] == "error"
        assert body["details"]["upstream_status_code"] == 402
        assert all(step["status"] == "pending" for step in body["details"]["steps"])

    def test_unexpected_failure(self, remote, http):
        remote.failures["create_assistant"] = UnexpectedError()

        response = http.post(AGENTS_URL, json={
            "description": "Answer coffee shop questions",
            "api_key": "sk_test_123",
        })

        assert response.status_code == 500
        assert response.json()["message"] == "An unexpected error occurred"


class TestContactCard:
    """Tests for GET /agents/contact-card."""

    def test_download(self, http):
        response = http.get(
            f"{AGENTS_URL}/contact-card",
            params={"name": "Coffee Bot", "phone_number": "+14155551234"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/vcard")
        assert response.headers["content-disposition"] == 'attachment; filename="Coffee_Bot.vcf"'
        assert "TEL;TYPE=CELL:+14155551234" in response.text

    def test_download_non_ascii_name(self, http):
        response = http.get(
            f"{AGENTS_URL}/contact-card",
            params={"name": "Café Bot", "phone_number": "+14155551234"},
        )

        assert response.status_code == 200
        assert response.headers["content-disposition"] == "attachment; filename*=utf-8''Caf%C3%A9_Bot.vcf"
        assert "FN:Café Bot" in response.text

    def test_download_quoted_name(self, http):
        response = http.get(
            f"{AGENTS_URL}/contact-card",
            params={"name": 'Coffee "Bot"', "phone_number": "+14155551234"},
        )

        assert response.status_code == 200
        assert response.headers["content-disposition"] == "attachment; filename*=utf-8''Coffee_%22Bot%22.vcf"

    def test_name_required(self, http):
        response = http.get(f"{AGENTS_URL}/contact-card", params={"phone_number": "+14155551234"})

        assert response.status_code == 422


def test_health(http):
    response = http.get(f"{URL_PREFIX}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
