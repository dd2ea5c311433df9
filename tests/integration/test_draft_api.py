"""
API tests for the draft endpoints.

Uses FastAPI's TestClient, so no server needs to be running.

Run with:
    pytest tests/integration/test_draft_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings, get_settings
from main import app


pytestmark = pytest.mark.integration


@pytest.fixture
def client():
    """Test client with the artificial delay disabled"""
    app.dependency_overrides[get_settings] = lambda: Settings(generation_delay_ms=0)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_draft(client):
    response = client.post(
        "/api/drafts",
        json={
            "tone": "friendly",
            "sender_name": "Jordan Rivers",
            "recipient_name": "Morgan",
            "objective": "to align on launch timeline",
            "key_points_input": "Beta feedback exceeded targets\nChecklist is ready",
            "seed": 3,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == "Beta feedback exceeded targets"
    assert "I'm reaching out to align on launch timeline." in data["body"]
    assert data["highlights"] == ["Beta feedback exceeded targets", "Checklist is ready"]
    assert data["plain_text"].startswith("Subject: Beta feedback exceeded targets\n\n")
    assert len(data["preview"]) <= 141


def test_blank_sender_uses_default(client):
    response = client.post("/api/drafts", json={"tone": "concise", "sender_name": ""})

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == "Concise Follow-Up"
    assert data["body"].endswith("MailMuse Agent")


def test_unknown_tone_rejected(client):
    response = client.post("/api/drafts", json={"tone": "sarcastic", "sender_name": "Sam"})
    assert response.status_code == 422


def test_list_tones(client):
    response = client.get("/api/tones")

    assert response.status_code == 200
    tones = response.json()
    assert len(tones) == 6
    assert {tone["value"] for tone in tones} == {
        "friendly", "formal", "enthusiastic", "empathetic", "persuasive", "concise"
    }


def test_list_samples(client):
    response = client.get("/api/samples")

    assert response.status_code == 200
    assert len(response.json()) == 3


def test_sample_draft(client):
    response = client.post("/api/samples/product-launch-update/draft")

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == "Upcoming launch timeline"
    assert data["tone"] == "persuasive"
    assert len(data["highlights"]) == 3
    # Persuasive is a direct cadence: no role sentence, one body paragraph
    assert "Given your role" not in data["body"]
    assert data["body"].endswith("P.S. Happy to share the launch dashboard if helpful.")


def test_sample_draft_unknown_slug(client):
    response = client.post("/api/samples/nope/draft")
    assert response.status_code == 404
