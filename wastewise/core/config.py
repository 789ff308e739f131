from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # "production" hides internal error messages from API responses
    ENVIRONMENT: str = "development"

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    # Google Cloud Vision (service account JSON, empty = application default credentials)
    GOOGLE_CLOUD_VISION_CREDENTIALS: str = ""

    # Google Places Configuration
    GOOGLE_MAPS_API_KEY: str = ""
    PLACES_NEARBY_URL: str = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
    PLACES_TIMEOUT_SECONDS: float = 10.0

    # HTTP Server
    CORS_ORIGINS: List[str] = ["*"]
    MAX_BODY_BYTES: int = 10 * 1024 * 1024
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

settings = Settings()
