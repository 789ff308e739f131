from typing import Optional
from fastapi import APIRouter, Depends, Request

from wastewise.models.waste_model import ClassifyWasteRequest, ClassificationResult
from wastewise.repos.base_repo import BaseLabelDetector, BasePlacesSearch
from wastewise.services.Venue_service import VenueFinder
from wastewise.services.Waste_service import WasteClassificationService

router = APIRouter(prefix="/api")

# --- Dependency Injection ---
# Collaborators are built once in the app lifespan and shared by every request
def get_label_detector(request: Request) -> Optional[BaseLabelDetector]:
    return getattr(request.app.state, "label_detector", None)

def get_places_search(request: Request) -> BasePlacesSearch:
    return request.app.state.places_search

def get_venue_finder(places: BasePlacesSearch = Depends(get_places_search)) -> VenueFinder:
    return VenueFinder(places)

def get_waste_service(
    detector: Optional[BaseLabelDetector] = Depends(get_label_detector),
    venue_finder: VenueFinder = Depends(get_venue_finder),
) -> WasteClassificationService:
    return WasteClassificationService(detector, venue_finder)

@router.post("/classify-waste", response_model=ClassificationResult)
async def classify_waste_endpoint(
    request: ClassifyWasteRequest,
    service: WasteClassificationService = Depends(get_waste_service)
):
    """
    Labels the uploaded image, maps the labels to a waste category and
    suggests up to three nearby disposal venues.
    """
    return await service.classify_waste(request.image_base64, request.user_location)
