"""Integration tests for the program API.

Run with: pytest tests/test_program_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from program.models import Item, School


def _school(name: str = "Sisoni Academy", category: str = "Primary") -> School:
    return School.objects.create(
        school_name=name,
        category=category,
        teacher_name="Jane Wanjiru",
        phone_number="+254 700 000000",
    )


@pytest.mark.django_db
class TestProgram:
    """Tests for GET /api/program"""

    def test_program_lays_out_both_halls(self, api_client: APIClient):
        primary = _school()
        Item.objects.create(school=primary, item_type="Play")
        Item.objects.create(school=primary, item_type="Cultural Creative Dance")
        early = _school("Riverside", "Pre-Primary")
        Item.objects.create(school=early, item_type="Dramatized Singing Games")

        response = api_client.get("/api/program")

        assert response.status_code == 200
        body = response.json()
        assert body["totalPerformances"] == 3
        assert body["startTime"] == "6:00 AM"
        assert body["intervalMinutes"] == 3

        hall_1, hall_2 = body["venues"]
        assert hall_1["name"] == "Hall 1"
        assert hall_1["slots"][0]["startTime"] == "6:00 AM"
        assert hall_1["slots"][0]["endTime"] == "6:05 AM"
        assert hall_1["categories"] == ["Pre-Primary"]

        assert hall_2["description"] == "Category B (Primary)"
        assert hall_2["slotCount"] == 2
        assert hall_2["totalElapsed"] == "0h 25m"
        assert hall_2["slots"] == [
            {
                "order": 1,
                "startTime": "6:00 AM",
                "endTime": "6:15 AM",
                "code": "B1",
                "item": "Play",
                "itemCode": "SIA-PRI-01",
                "schoolName": "Sisoni Academy",
                "durationMinutes": 15,
                "maxCast": 20,
                "category": "Primary",
            },
            {
                "order": 2,
                "startTime": "6:18 AM",
                "endTime": "6:25 AM",
                "code": "B2",
                "item": "Cultural Creative Dance",
                "itemCode": "SIA-PRI-02",
                "schoolName": "Sisoni Academy",
                "durationMinutes": 7,
                "maxCast": 30,
                "category": "Primary",
            },
        ]

    def test_empty_program(self, api_client: APIClient):
        response = api_client.get("/api/program")

        assert response.status_code == 200
        body = response.json()
        assert body["totalPerformances"] == 0
        for venue in body["venues"]:
            assert venue["slots"] == []
            assert venue["slotCount"] == 0
            assert venue["totalElapsed"] == "0h 0m"

    def test_unmapped_category_rejected(self, api_client: APIClient, settings):
        settings.PROGRAM_SCHEDULE = {
            "unmapped_category_policy": "reject",
            "venues": [{"name": "Hall 2", "categories": ["Primary"]}],
        }
        Item.objects.create(school=_school("Riverside", "Pre-Primary"), item_type="Film")

        response = api_client.get("/api/program")

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "UNMAPPED_CATEGORY"

    def test_unmapped_category_dropped_by_default(self, api_client: APIClient, settings):
        settings.PROGRAM_SCHEDULE = {
            "venues": [{"name": "Hall 2", "categories": ["Primary"]}],
        }
        Item.objects.create(school=_school("Riverside", "Pre-Primary"), item_type="Film")
        Item.objects.create(school=_school(), item_type="Play")

        response = api_client.get("/api/program")

        assert response.status_code == 200
        assert response.json()["totalPerformances"] == 1


@pytest.mark.django_db
class TestItemCounts:
    """Tests for GET /api/program/item-counts"""

    def test_counts_grouped_and_sorted(self, api_client: APIClient):
        primary = _school()
        Item.objects.create(school=primary, item_type="Play")
        Item.objects.create(school=_school("Spring Academy"), item_type="Play")
        Item.objects.create(school=primary, item_type="Film")
        Item.objects.create(school=_school("Riverside", "Lower Primary"), item_type="Film for Early Years")

        response = api_client.get("/api/program/item-counts")

        assert response.status_code == 200
        assert response.json()["itemCounts"] == [
            {"category": "Lower Primary", "itemType": "Film for Early Years", "count": 1},
            {"category": "Primary", "itemType": "Film", "count": 1},
            {"category": "Primary", "itemType": "Play", "count": 2},
        ]

    def test_filter_by_category(self, api_client: APIClient):
        Item.objects.create(school=_school(), item_type="Play")
        Item.objects.create(school=_school("Riverside", "Lower Primary"), item_type="Film for Early Years")

        response = api_client.get("/api/program/item-counts", {"category": "Lower Primary"})

        assert response.status_code == 200
        assert [c["itemType"] for c in response.json()["itemCounts"]] == ["Film for Early Years"]

    def test_unknown_category(self, api_client: APIClient):
        response = api_client.get("/api/program/item-counts", {"category": "Secondary"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNKNOWN_CATEGORY"


@pytest.mark.django_db
class TestRegulations:
    """Tests for GET /api/regulations/{category}"""

    def test_lists_regulations(self, api_client: APIClient):
        response = api_client.get("/api/regulations/Primary")

        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "Primary"
        assert len(body["items"]) == 10
        assert body["items"][0] == {
            "code": "B1",
            "itemType": "Play",
            "maxTime": "15 min",
            "maxCast": 20,
            "durationMinutes": 15,
        }
        assert body["items"][6]["maxCast"] is None

    def test_unknown_category(self, api_client: APIClient):
        response = api_client.get("/api/regulations/Secondary")

        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "CATEGORY_NOT_FOUND", "message": "Category not found"}
        }


@pytest.mark.django_db
class TestItemRegistration:
    """Tests for item code generation and school totals."""

    def test_item_codes_are_sequential_per_school(self):
        school = _school()

        first = Item.objects.create(school=school, item_type="Play")
        second = Item.objects.create(school=school, item_type="Film")

        assert (first.item_code, second.item_code) == ("SIA-PRI-01", "SIA-PRI-02")

    def test_item_code_not_reused_after_delete(self):
        school = _school()
        first = Item.objects.create(school=school, item_type="Play")
        Item.objects.create(school=school, item_type="Film")

        first.delete()
        third = Item.objects.create(school=school, item_type="Narrative")

        assert third.item_code == "SIA-PRI-03"
        assert sorted(Item.objects.values_list("item_code", flat=True)) == [
            "SIA-PRI-02",
            "SIA-PRI-03",
        ]

    def test_explicit_item_code_is_kept(self):
        item = Item.objects.create(school=_school(), item_type="Play", item_code="CUSTOM-1")

        assert item.item_code == "CUSTOM-1"

    def test_school_total_items_follows_items(self):
        school = _school()
        first = Item.objects.create(school=school, item_type="Play")
        Item.objects.create(school=school, item_type="Film")

        school.refresh_from_db()
        assert school.total_items == 2

        first.delete()

        school.refresh_from_db()
        assert school.total_items == 1
