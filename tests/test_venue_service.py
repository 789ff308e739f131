"""Unit tests for VenueFinder."""

import httpx
import pytest

from conftest import FakePlacesSearch
from wastewise.models.waste_model import WasteCategory
from wastewise.services.Venue_service import (
    MAX_VENUES,
    SEARCH_RADIUS_METERS,
    VenueFinder,
)


class TestSearchKeyword:
    """Tests for the category to keyword table."""

    @pytest.mark.parametrize(
        "category, keyword",
        [
            (WasteCategory.RECYCLABLE, "recycling center"),
            (WasteCategory.HAZARDOUS, "hazardous waste disposal"),
            (WasteCategory.DONATABLE, "thrift store OR donation center"),
            (WasteCategory.ORGANIC, "compost facility"),
            (WasteCategory.GENERAL_WASTE, "waste disposal"),
        ],
    )
    def test_keyword_per_category(self, category, keyword):
        finder = VenueFinder(FakePlacesSearch())
        assert finder._get_keyword(category) == keyword


class TestFindVenues:
    """Tests for find_venues."""

    @pytest.mark.asyncio
    async def test_sends_single_query(self, location, places_payload):
        """One search with the fixed radius, keyword and location."""
        places = FakePlacesSearch(places_payload)
        await VenueFinder(places).find_venues(WasteCategory.ORGANIC, location)

        assert places.calls == [
            {"location": location, "radius": SEARCH_RADIUS_METERS, "keyword": "compost facility"}
        ]
        assert SEARCH_RADIUS_METERS == 5000

    @pytest.mark.asyncio
    async def test_returns_at_most_three_venues(self, location, places_payload):
        """Only the first three results are kept, in API order."""
        result = await VenueFinder(FakePlacesSearch(places_payload)).find_venues(
            WasteCategory.RECYCLABLE, location
        )

        assert result.ok
        assert result.status == "OK"
        assert len(result.venues) == MAX_VENUES
        assert [v.name for v in result.venues] == ["Green Recycling", "City Drop-off", "EcoCenter"]
        assert result.venues[0].address == "1 Main St"

    @pytest.mark.asyncio
    async def test_missing_rating_is_absent(self, location, places_payload):
        """Rating is None internally and "N/A" in JSON."""
        result = await VenueFinder(FakePlacesSearch(places_payload)).find_venues(
            WasteCategory.RECYCLABLE, location
        )
        venue = result.venues[1]

        assert venue.rating is None
        assert venue.model_dump()["rating"] is None
        assert venue.model_dump(mode="json")["rating"] == "N/A"
        assert result.venues[0].model_dump(mode="json")["rating"] == 4.6

    @pytest.mark.asyncio
    async def test_skips_results_without_name_or_address(self, location):
        """Incomplete places do not produce venues."""
        payload = {
            "status": "OK",
            "results": [
                {"name": "", "vicinity": "somewhere"},
                {"name": "No Address"},
                {"name": "Kept", "vicinity": "5 Elm St", "rating": 4},
            ],
        }
        result = await VenueFinder(FakePlacesSearch(payload)).find_venues(
            WasteCategory.HAZARDOUS, location
        )

        assert [v.name for v in result.venues] == ["Kept"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["ZERO_RESULTS", "REQUEST_DENIED", "OVER_QUERY_LIMIT"])
    async def test_non_ok_status_returns_empty(self, location, status):
        """A non-OK status degrades to an empty list."""
        payload = {"status": status, "results": [], "error_message": "denied"}
        result = await VenueFinder(FakePlacesSearch(payload)).find_venues(
            WasteCategory.DONATABLE, location
        )

        assert result.venues == []
        assert result.status == status
        assert not result.ok

    @pytest.mark.asyncio
    async def test_transport_failure_returns_empty(self, location):
        """Network errors never escape the finder."""
        places = FakePlacesSearch(error=httpx.ConnectError("connection refused"))
        result = await VenueFinder(places).find_venues(WasteCategory.RECYCLABLE, location)

        assert result.venues == []
        assert result.status == "ERROR"
        assert "connection refused" in result.error

    @pytest.mark.asyncio
    async def test_unreadable_rating_is_treated_as_absent(self, location):
        """One bad rating does not discard the other venues."""
        payload = {
            "status": "OK",
            "results": [
                {"name": "Good", "vicinity": "1 Main St", "rating": 4.0},
                {"name": "Bad", "vicinity": "2 Main St", "rating": "unrated"},
            ],
        }
        result = await VenueFinder(FakePlacesSearch(payload)).find_venues(
            WasteCategory.RECYCLABLE, location
        )

        assert result.ok
        assert [v.name for v in result.venues] == ["Good", "Bad"]
        assert result.venues[0].rating == 4.0
        assert result.venues[1].rating is None
        assert result.venues[1].model_dump(mode="json")["rating"] == "N/A"

    @pytest.mark.asyncio
    async def test_malformed_place_is_skipped(self, location):
        """A place whose name cannot be read is dropped, the rest are kept."""
        payload = {
            "status": "OK",
            "results": [
                {"name": ["not", "a", "name"], "vicinity": "x"},
                {"name": "Kept", "vicinity": "5 Elm St"},
            ],
        }
        result = await VenueFinder(FakePlacesSearch(payload)).find_venues(
            WasteCategory.RECYCLABLE, location
        )

        assert [v.name for v in result.venues] == ["Kept"]

    @pytest.mark.asyncio
    async def test_malformed_payload_returns_empty(self, location):
        """A payload that is not a place list is absorbed."""
        payload = {"status": "OK", "results": ["not a place"]}
        result = await VenueFinder(FakePlacesSearch(payload)).find_venues(
            WasteCategory.RECYCLABLE, location
        )

        assert result.venues == []
        assert result.status == "ERROR"
