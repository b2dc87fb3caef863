"""Integration tests for the event scheduling API.

Run with: pytest tests/test_event_api.py -v
"""

from unittest import mock

import pytest
from rest_framework.test import APIClient

from agenda.stores.django_store import DjangoEventStore
from agenda.stores.interfaces import StoreError

WEEKLY_PAYLOAD = {
    "kind": "recurring",
    "title": "Yoga",
    "description": "Studio B",
    "start_date": "2024-01-01",
    "frequency": "weekly",
    "interval": 2,
    "weekdays": ["Monday", "WEDNESDAY"],
    "end_condition": "by_count",
    "occurrence_count": 4,
}


def create(api_client: APIClient, payload: dict) -> str:
    response = api_client.post("/api/events", payload, format="json")
    assert response.status_code == 201, response.data
    return response.data["event_id"]


@pytest.mark.django_db
class TestCreateEvent:
    """Tests for POST /api/events"""

    def test_create_recurring_event(self, api_client: APIClient):
        event_id = create(api_client, WEEKLY_PAYLOAD)

        response = api_client.get(f"/api/events/{event_id}/occurrences")
        assert response.status_code == 200
        assert [item["date"] for item in response.data] == [
            "2024-01-01",
            "2024-01-03",
            "2024-01-15",
            "2024-01-17",
        ]
        assert [item["id"] for item in response.data] == [
            f"{event_id}_0",
            f"{event_id}_1",
            f"{event_id}_2",
            f"{event_id}_3",
        ]
        assert {item["description"] for item in response.data} == {"Studio B"}

    def test_create_single_event(self, api_client: APIClient):
        event_id = create(
            api_client, {"kind": "single", "title": "Dentist", "start_date": "2024-05-02"}
        )
        response = api_client.get(f"/api/events/{event_id}/occurrences")
        assert [item["date"] for item in response.data] == ["2024-05-02"]

    def test_start_datetime_is_normalized_to_utc_day(self, api_client: APIClient):
        event_id = create(
            api_client,
            {"kind": "single", "title": "Call", "start_date": "2024-05-02T21:00:00-05:00"},
        )
        response = api_client.get(f"/api/events/{event_id}/occurrences")
        assert [item["date"] for item in response.data] == ["2024-05-03"]

    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"weekdays": []}, "weekdays"),
            ({"weekdays": ["caturday"]}, "weekdays"),
            ({"interval": 0}, "interval"),
            ({"occurrence_count": 0}, "occurrence_count"),
            ({"frequency": None}, "frequency"),
            ({"end_condition": "by_date", "end_date": None}, "end_date"),
            ({"end_condition": "by_date", "end_date": "2023-12-01"}, "end_date"),
            ({"frequency": "monthly", "month_days": []}, "month_days"),
            ({"title": ""}, "title"),
        ],
    )
    def test_invalid_rule_returns_400(self, api_client: APIClient, changes, field):
        response = api_client.post("/api/events", {**WEEKLY_PAYLOAD, **changes}, format="json")
        assert response.status_code == 400
        assert field in response.data

    def test_store_failure_returns_coarse_error(self, api_client: APIClient):
        with mock.patch.object(
            DjangoEventStore, "create_event", side_effect=StoreError("disk full")
        ):
            response = api_client.post("/api/events", WEEKLY_PAYLOAD, format="json")

        assert response.status_code == 500
        assert response.data == {"code": "EVENT_SAVE_FAILED", "message": "Could not save event"}


@pytest.mark.django_db
class TestPreview:
    """Tests for POST /api/events/preview"""

    def test_preview_returns_dates_without_storing(self, api_client: APIClient):
        payload = {
            "kind": "recurring",
            "title": "Rent",
            "start_date": "2024-01-15",
            "end_date": "2024-04-30",
            "frequency": "monthly",
            "month_days": [31],
            "end_condition": "by_date",
        }
        response = api_client.post("/api/events/preview", payload, format="json")

        assert response.status_code == 200
        assert response.data == {"dates": ["2024-01-31", "2024-03-31"]}
        assert api_client.get("/api/events").data == []


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        event_id = create(api_client, WEEKLY_PAYLOAD)
        response = api_client.get(f"/api/events/{event_id}")

        assert response.status_code == 200
        assert response.data["id"] == event_id
        assert response.data["title"] == "Yoga"
        assert response.data["rule"]["weekdays"] == ["monday", "wednesday"]
        assert response.data["rule"]["end_condition"] == "by_count"
        assert response.data["rule"]["end_date"] is None

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/12345678-1234-5678-1234-567812345678")
        assert response.status_code == 404
        assert response.data["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.data["code"] == "INVALID_EVENT_ID"

    def test_list_events(self, api_client: APIClient):
        event_id = create(api_client, WEEKLY_PAYLOAD)
        response = api_client.get("/api/events")
        assert [item["id"] for item in response.data] == [event_id]


@pytest.mark.django_db
class TestOccurrenceList:
    """Tests for GET /api/events/{id}/occurrences and /api/occurrences"""

    def test_event_occurrences_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/12345678-1234-5678-1234-567812345678/occurrences")
        assert response.status_code == 404

    def test_occurrences_by_date(self, api_client: APIClient):
        yoga = create(api_client, WEEKLY_PAYLOAD)
        create(api_client, {"kind": "single", "title": "Lunch", "start_date": "2024-01-16"})

        response = api_client.get("/api/occurrences", {"date": "2024-01-15"})
        assert response.status_code == 200
        assert [(item["event_id"], item["title"]) for item in response.data] == [(yoga, "Yoga")]

    def test_occurrences_by_date_accepts_timestamps(self, api_client: APIClient):
        create(api_client, WEEKLY_PAYLOAD)
        response = api_client.get("/api/occurrences", {"date": "2024-01-03T00:00:00Z"})
        assert [item["date"] for item in response.data] == ["2024-01-03"]

    @pytest.mark.parametrize("query", [{}, {"date": "soon"}])
    def test_occurrences_by_date_invalid(self, api_client: APIClient, query):
        response = api_client.get("/api/occurrences", query)
        assert response.status_code == 400
        assert response.data["code"] == "INVALID_DATE"


@pytest.mark.django_db
class TestPreviewAtCalendarLimit:
    """Tests for POST /api/events/preview with the last representable date"""

    def test_preview_until_last_day(self, api_client: APIClient):
        payload = {
            "kind": "recurring",
            "title": "Far future",
            "start_date": "9999-11-01",
            "end_date": "9999-12-31",
            "frequency": "monthly",
            "month_days": [1],
            "end_condition": "by_date",
        }
        response = api_client.post("/api/events/preview", payload, format="json")

        assert response.status_code == 200
        assert response.data == {"dates": ["9999-11-01", "9999-12-01"]}
