"""API tests for events: public listing and admin create/update/delete."""

import pytest

from ecell.core.config import settings

UPCOMING = {
    "title": "Startup Pitch Night",
    "date": "2025-03-10T18:00:00",
    "description": "Pitch your idea to mentors.",
    "status": "upcoming",
    "registrationLink": "https://forms.example.com/pitch",
}


def _events(client) -> list[dict]:
    res = client.get("/api/events")
    assert res.status_code == 200
    return res.json()


def _create(client, headers, payload) -> dict:
    res = client.post("/api/admin/events", json=payload, headers=headers)
    assert res.status_code == 201, res.json()
    return res.json()["event"]


class TestCreateEvent:

    def test_round_trip_through_public_listing(self, client, admin_headers):
        res = client.post("/api/admin/events", json=UPCOMING, headers=admin_headers)
        assert res.status_code == 201
        assert res.json()["success"] is True

        [event] = _events(client)
        assert event["title"] == UPCOMING["title"]
        assert event["date"].startswith("2025-03-10T18:00:00")
        assert event["description"] == UPCOMING["description"]
        assert event["status"] == "upcoming"
        assert event["registrationLink"] == UPCOMING["registrationLink"]

    def test_image_defaults_to_placeholder(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)
        assert event["image"] == "/assets/events/default.jpg"

    def test_blank_optional_fields_become_null(self, client, admin_headers):
        event = _create(client, admin_headers, {**UPCOMING, "summary": "  ", "image": ""})
        assert event["summary"] is None
        assert event["image"] == "/assets/events/default.jpg"

    def test_snake_case_input_is_accepted(self, client, admin_headers):
        payload = {k: v for k, v in UPCOMING.items() if k != "registrationLink"}
        event = _create(client, admin_headers, {**payload, "registration_link": "https://x.example"})
        assert event["registrationLink"] == "https://x.example"

    @pytest.mark.parametrize(
        "payload",
        [
            {**UPCOMING, "status": "cancelled"},
            {**UPCOMING, "date": "next tuesday"},
            {k: v for k, v in UPCOMING.items() if k != "title"},
        ],
        ids=["unknown-status", "bad-date", "missing-title"],
    )
    def test_invalid_payload_is_400(self, client, admin_headers, payload):
        res = client.post("/api/admin/events", json=payload, headers=admin_headers)
        assert res.status_code == 400
        assert res.json()["success"] is False
        assert _events(client) == []

    def test_lenient_policy_accepts_upcoming_without_link(self, client, admin_headers):
        payload = {k: v for k, v in UPCOMING.items() if k != "registrationLink"}
        assert _create(client, admin_headers, payload)["registrationLink"] is None


class TestStrictStatusPolicy:

    @pytest.fixture(autouse=True)
    def strict(self, monkeypatch):
        monkeypatch.setattr(settings, "EVENT_STATUS_POLICY", "strict")

    def test_upcoming_without_link_is_rejected(self, client, admin_headers):
        payload = {k: v for k, v in UPCOMING.items() if k != "registrationLink"}
        res = client.post("/api/admin/events", json=payload, headers=admin_headers)
        assert res.status_code == 400
        assert res.json()["errors"][0]["field"] == "registrationLink"

    def test_switching_to_past_requires_summary(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)
        url = f"/api/admin/events/{event['id']}"

        assert client.put(url, json={"status": "past"}, headers=admin_headers).status_code == 400
        assert _events(client)[0]["status"] == "upcoming"

        res = client.put(url, json={"status": "past", "summary": "Great turnout."}, headers=admin_headers)
        assert res.status_code == 200


class TestListEvents:

    def test_newest_date_first(self, client, admin_headers):
        for title, date in [("Old", "2023-01-01T10:00:00"), ("New", "2025-06-01T10:00:00"), ("Mid", "2024-03-01T10:00:00")]:
            _create(client, admin_headers, {**UPCOMING, "title": title, "date": date})
        assert [e["title"] for e in _events(client)] == ["New", "Mid", "Old"]

    def test_listing_is_public(self, client):
        assert client.get("/api/events").status_code == 200


class TestUpdateEvent:

    def test_status_change_to_past_with_summary(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)

        res = client.put(
            f"/api/admin/events/{event['id']}",
            json={"status": "past", "summary": "Twelve teams pitched."},
            headers=admin_headers,
        )
        assert res.status_code == 200
        updated = res.json()["event"]
        assert updated["status"] == "past"
        assert updated["summary"] == "Twelve teams pitched."
        # campos não enviados ficam como estavam
        assert updated["title"] == UPCOMING["title"]

        [listed] = _events(client)
        assert listed["status"] == "past"
        assert listed["summary"] == "Twelve teams pitched."

    def test_last_write_wins(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)
        url = f"/api/admin/events/{event['id']}"
        client.put(url, json={"title": "First edit"}, headers=admin_headers)
        client.put(url, json={"title": "Second edit"}, headers=admin_headers)
        assert _events(client)[0]["title"] == "Second edit"

    def test_null_for_required_field_is_400(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)
        res = client.put(f"/api/admin/events/{event['id']}", json={"title": None}, headers=admin_headers)
        assert res.status_code == 400

    def test_update_unknown_event_is_404(self, client, admin_headers):
        res = client.put("/api/admin/events/missing", json={"title": "x"}, headers=admin_headers)
        assert res.status_code == 404


class TestDeleteEvent:

    def test_delete_removes_event(self, client, admin_headers):
        event = _create(client, admin_headers, UPCOMING)
        res = client.delete(f"/api/admin/events/{event['id']}", headers=admin_headers)
        assert res.status_code == 200
        assert res.json()["success"] is True
        assert _events(client) == []

    def test_delete_unknown_event_is_404(self, client, admin_headers):
        assert client.delete("/api/admin/events/missing", headers=admin_headers).status_code == 404


class TestRoutingErrors:

    def test_wrong_method_uses_error_envelope(self, client, admin_headers):
        res = client.patch("/api/admin/events/x", json={"title": "x"}, headers=admin_headers)
        assert res.status_code == 405
        assert res.json() == {"success": False, "message": "Method Not Allowed"}
        assert "PUT" in res.headers["allow"]

    def test_unknown_route_uses_error_envelope(self, client):
        res = client.get("/api/no-such-route")
        assert res.status_code == 404
        assert res.json() == {"success": False, "message": "Not Found"}
