"""
Collaborator interfaces for the external services the API relays to.
Concrete implementations are built once at startup and injected into the services.
"""
from abc import ABC, abstractmethod
from typing import List

from wastewise.models.waste_model import GeoPoint

class BaseLabelDetector(ABC):
    """Base class for image label-detection services"""

    @abstractmethod
    async def detect_labels(self, image_base64: str) -> List[str]:
        """Return label descriptions for the image, in the service's ranked order"""

    async def close(self):
        """Release any underlying connections"""

class BasePlacesSearch(ABC):
    """Base class for nearby-places search services"""

    @abstractmethod
    async def nearby_search(self, location: GeoPoint, radius: int, keyword: str) -> dict:
        """
        Run a single nearby search and return the raw payload:
        {"status": str, "results": [{"name", "vicinity", "rating"}, ...], "error_message": str?}
        """
