import httpx

from wastewise.models.waste_model import GeoPoint
from wastewise.repos.base_repo import BasePlacesSearch

class GooglePlacesSearch(BasePlacesSearch):
    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str, timeout: float = 10.0):
        self.client = client
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    async def nearby_search(self, location: GeoPoint, radius: int, keyword: str) -> dict:
        """
        Calls the Nearby Search endpoint once. HTTP and decoding errors propagate
        to the caller; API-level failures come back in the payload's "status".
        """
        params = {
            "location": location.as_query(),
            "radius": radius,
            "keyword": keyword,
            "key": self.api_key,
        }
        response = await self.client.get(self.base_url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
