from pydantic import BaseModel, field_serializer, field_validator
from typing import List, Optional, Union

RATING_UNAVAILABLE = "N/A"

class Venue(BaseModel):
    name: str
    address: str
    rating: Optional[float] = None

    @field_validator("rating", mode="before")
    @classmethod
    def parse_rating(cls, rating):
        return None if rating == RATING_UNAVAILABLE else rating

    @field_serializer("rating", when_used="json")
    def serialize_rating(self, rating: Optional[float]) -> Union[float, str]:
        # Absent ratings only become the sentinel string on the wire
        return RATING_UNAVAILABLE if rating is None else rating

class VenueSearchResult(BaseModel):
    """Outcome of a venue lookup. Failures carry an empty list, never an exception."""
    venues: List[Venue] = []
    status: str  # places API status, or "ERROR" for transport failures
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
