"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from program.handlers.views import ITEM_COUNTS_CACHE_KEY, PROGRAM_CACHE_KEY
from program.models import Item, School


@pytest.fixture
def school() -> School:
    return School.objects.create(
        school_name="Sisoni Academy",
        category="Primary",
        teacher_name="Jane Wanjiru",
        phone_number="0700000000",
    )


@pytest.mark.django_db
class TestProgramCache:
    """Tests for cached program responses."""

    def test_program_response_is_cached(self, api_client: APIClient, school):
        Item.objects.create(school=school, item_type="Play")

        response = api_client.get("/api/program")

        assert cache.get(PROGRAM_CACHE_KEY) == response.json()

    def test_cached_program_is_served(self, api_client: APIClient):
        cache.set(PROGRAM_CACHE_KEY, {"venues": [], "totalPerformances": 99})

        response = api_client.get("/api/program")

        assert response.json()["totalPerformances"] == 99

    def test_filtered_item_counts_are_not_cached(self, api_client: APIClient):
        api_client.get("/api/program/item-counts", {"category": "Primary"})

        assert cache.get(ITEM_COUNTS_CACHE_KEY) is None


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_item_save_invalidates_program(self, api_client: APIClient, school):
        api_client.get("/api/program")
        api_client.get("/api/program/item-counts")
        assert cache.get(PROGRAM_CACHE_KEY) is not None

        Item.objects.create(school=school, item_type="Play")

        assert cache.get(PROGRAM_CACHE_KEY) is None
        assert cache.get(ITEM_COUNTS_CACHE_KEY) is None

    def test_item_delete_invalidates_program(self, api_client: APIClient, school):
        item = Item.objects.create(school=school, item_type="Play")
        api_client.get("/api/program")

        item.delete()

        assert cache.get(PROGRAM_CACHE_KEY) is None

    def test_school_save_invalidates_program(self, api_client: APIClient, school):
        api_client.get("/api/program")

        school.school_name = "Sisoni Academy Annex"
        school.save()

        assert cache.get(PROGRAM_CACHE_KEY) is None

    def test_new_item_appears_after_invalidation(self, api_client: APIClient, school):
        assert api_client.get("/api/program").json()["totalPerformances"] == 0

        Item.objects.create(school=school, item_type="Film")

        assert api_client.get("/api/program").json()["totalPerformances"] == 1
