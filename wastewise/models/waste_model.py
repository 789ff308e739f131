from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from enum import Enum
from datetime import datetime, timezone

from wastewise.models.venue_model import Venue

# --- Enums ---
class WasteCategory(str, Enum):
    RECYCLABLE = "Recyclable"
    HAZARDOUS = "Hazardous"
    DONATABLE = "Donatable"
    ORGANIC = "Organic"
    GENERAL_WASTE = "General Waste"

# --- Domain Models ---
class GeoPoint(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def as_query(self) -> str:
        """Formats the point the way the places API expects it ("lat,lng")."""
        return f"{self.latitude},{self.longitude}"

# --- API Request/Response Models ---
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class UserLocation(CamelModel):
    # Both optional so that missing coordinates reach the service's own checks
    lat: Optional[float] = None
    lng: Optional[float] = None

class ClassifyWasteRequest(CamelModel):
    image_base64: Optional[str] = Field(None, description="Base64 encoded image bytes")
    user_location: Optional[UserLocation] = Field(None, description="Where to search for disposal venues")

class ClassificationResult(CamelModel):
    labels: List[str]
    waste_type: WasteCategory
    locations: List[Venue] = []
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
