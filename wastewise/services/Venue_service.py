import logging
from typing import List, Optional

from pydantic import ValidationError

from wastewise.core.logger import logs
from wastewise.models.venue_model import Venue, VenueSearchResult
from wastewise.models.waste_model import GeoPoint, WasteCategory
from wastewise.repos.base_repo import BasePlacesSearch

SEARCH_RADIUS_METERS = 5000
MAX_VENUES = 3
DEFAULT_SEARCH_KEYWORD = "waste disposal"

SEARCH_KEYWORDS = {
    WasteCategory.RECYCLABLE: "recycling center",
    WasteCategory.HAZARDOUS: "hazardous waste disposal",
    WasteCategory.DONATABLE: "thrift store OR donation center",
    WasteCategory.ORGANIC: "compost facility",
}

class VenueFinder:
    def __init__(self, places: BasePlacesSearch):
        self.places = places

    def _get_keyword(self, category: WasteCategory) -> str:
        """Search keyword for a category, General Waste falls through to the default."""
        return SEARCH_KEYWORDS.get(category, DEFAULT_SEARCH_KEYWORD)

    async def find_venues(self, category: WasteCategory, location: GeoPoint) -> VenueSearchResult:
        keyword = self._get_keyword(category)
        logs.log(logging.INFO, f"Searching venues for '{keyword}' near {location.latitude}, {location.longitude}")

        try:
            data = await self.places.nearby_search(location, SEARCH_RADIUS_METERS, keyword)
            status = data.get("status")

            if status != "OK":
                logs.log(logging.ERROR, f"Places API error: {status}", extra={"error_message": data.get("error_message")})
                return VenueSearchResult(status=str(status), error=data.get("error_message") or f"Places API returned {status}")

            venues = self._normalize(data.get("results", []))
            logs.log(logging.INFO, f"Found {len(venues)} venues for '{keyword}'")
            return VenueSearchResult(venues=venues, status=status)

        except Exception as e:
            logs.log(logging.ERROR, f"Error fetching nearby locations: {str(e)}")
            return VenueSearchResult(status="ERROR", error=str(e))

    def _normalize(self, results: list) -> List[Venue]:
        """Top places in API order, skipping entries without a usable name or address."""
        venues = []
        for place in results:
            venue = self._to_venue(place)
            if venue is None:
                continue

            venues.append(venue)
            if len(venues) == MAX_VENUES:
                break
        return venues

    def _to_venue(self, place: dict) -> Optional[Venue]:
        name = place.get("name")
        address = place.get("vicinity")
        if not name or not address:
            return None

        try:
            return Venue(name=name, address=address, rating=place.get("rating"))
        except ValidationError:
            # Unreadable rating is treated as absent, like any other missing rating
            logs.log(logging.WARNING, f"Ignoring unreadable rating for '{name}'", extra={"rating": place.get("rating")})

        try:
            return Venue(name=name, address=address)
        except ValidationError as e:
            logs.log(logging.WARNING, f"Skipping malformed place: {str(e)}")
            return None
