import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from wastewise.core.exceptions import (
    InvalidImageError,
    InvalidLocationError,
    ProcessingError,
    ServiceUnavailableError,
)
from wastewise.core.logger import logs
from wastewise.models.waste_model import ClassificationResult, GeoPoint, UserLocation
from wastewise.repos.base_repo import BaseLabelDetector
from wastewise.services.Classifier_service import classify_labels
from wastewise.services.Venue_service import VenueFinder

class WasteClassificationService:
    """
    Runs one classify-waste request: validate, detect labels, classify,
    then look up disposal venues for the category.
    """
    def __init__(self, detector: Optional[BaseLabelDetector], venue_finder: VenueFinder):
        self.detector = detector
        self.venue_finder = venue_finder

    async def classify_waste(self, image_base64: Optional[str], user_location: Optional[UserLocation]) -> ClassificationResult:
        # 1. Validate (first failure wins)
        if not image_base64 or not image_base64.strip():
            raise InvalidImageError("imageBase64 must be a non-empty base64 string")

        location = self._to_geo_point(user_location)

        if self.detector is None:
            logs.log(logging.ERROR, "Label detection requested but the Vision client is not initialized")
            raise ServiceUnavailableError("Vision client is not initialized")

        try:
            # 2. Detect labels
            descriptions = await self.detector.detect_labels(image_base64)
            labels = [description.lower() for description in descriptions]
            logs.log(logging.INFO, "Vision API labels", extra={"labels": labels})

            # 3. Classify
            waste_type = classify_labels(labels)
            logs.log(logging.INFO, f"Classified as {waste_type.value}")

            # 4. Find venues (never raises, empty list on failure)
            search = await self.venue_finder.find_venues(waste_type, location)

            return ClassificationResult(labels=labels, waste_type=waste_type, locations=search.venues)

        except Exception as e:
            logs.log(logging.ERROR, f"Error in classify-waste: {str(e)}", extra={"stage": "processing"})
            raise ProcessingError(str(e) or "Failed to classify image") from e

    def _to_geo_point(self, user_location: Optional[UserLocation]) -> GeoPoint:
        if user_location is None or user_location.lat is None or user_location.lng is None:
            raise InvalidLocationError("userLocation must include both lat and lng")
        try:
            return GeoPoint(latitude=user_location.lat, longitude=user_location.lng)
        except PydanticValidationError as e:
            raise InvalidLocationError(f"userLocation is out of range: {e.errors()[0]['msg']}") from e
