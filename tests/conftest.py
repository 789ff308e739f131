"""Shared fixtures: fake collaborators standing in for Vision and Places."""

from typing import List

import pytest

from wastewise.models.waste_model import GeoPoint
from wastewise.repos.base_repo import BaseLabelDetector, BasePlacesSearch


class FakeLabelDetector(BaseLabelDetector):
    def __init__(self, labels: List[str] = None, error: Exception = None):
        self.labels = labels or []
        self.error = error
        self.calls = []

    async def detect_labels(self, image_base64: str) -> List[str]:
        self.calls.append(image_base64)
        if self.error:
            raise self.error
        return list(self.labels)


class FakePlacesSearch(BasePlacesSearch):
    def __init__(self, payload: dict = None, error: Exception = None):
        self.payload = payload if payload is not None else {"status": "ZERO_RESULTS", "results": []}
        self.error = error
        self.calls = []

    async def nearby_search(self, location: GeoPoint, radius: int, keyword: str) -> dict:
        self.calls.append({"location": location, "radius": radius, "keyword": keyword})
        if self.error:
            raise self.error
        return self.payload


@pytest.fixture
def location() -> GeoPoint:
    return GeoPoint(latitude=37.7749, longitude=-122.4194)


@pytest.fixture
def places_payload() -> dict:
    return {
        "status": "OK",
        "results": [
            {"name": "Green Recycling", "vicinity": "1 Main St", "rating": 4.6},
            {"name": "City Drop-off", "vicinity": "22 Market St"},
            {"name": "EcoCenter", "vicinity": "300 Bay Rd", "rating": 3.9},
            {"name": "Fourth Place", "vicinity": "9 Pier", "rating": 5.0},
        ],
    }
