"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from program.config import ScheduleSettings
from program.domain import RegisteredItem


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def schedule_settings() -> ScheduleSettings:
    return ScheduleSettings()


@pytest.fixture
def make_item():
    """Build RegisteredItems with sequential item codes."""
    counter = {"n": 0}

    def _make(item_type: str, category: str = "Primary", school_name: str = "Sisoni Academy"):
        counter["n"] += 1
        return RegisteredItem(
            item_type=item_type,
            item_code=f"ITEM-{counter['n']:03d}",
            school_name=school_name,
            category=category,
        )

    return _make
