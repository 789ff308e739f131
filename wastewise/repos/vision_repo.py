import base64
import binascii
import json
import logging
from typing import List, Optional

from google.auth.exceptions import DefaultCredentialsError
from google.cloud import vision
from google.oauth2 import service_account

from wastewise.core.logger import logs
from wastewise.repos.base_repo import BaseLabelDetector

class LabelDetectionError(Exception):
    """Raised when the Vision API reports an error for the submitted image."""

class GoogleVisionLabelDetector(BaseLabelDetector):
    def __init__(self, client: vision.ImageAnnotatorAsyncClient):
        self.client = client

    async def detect_labels(self, image_base64: str) -> List[str]:
        # MIME-style base64 wraps lines, strip all whitespace before strict decoding
        compact = "".join(image_base64.split())
        try:
            content = base64.b64decode(compact, validate=True)
        except binascii.Error as e:
            raise LabelDetectionError(f"Image data is not valid base64: {str(e)}") from e

        request = vision.AnnotateImageRequest(
            image=vision.Image(content=content),
            features=[vision.Feature(type_=vision.Feature.Type.LABEL_DETECTION)],
        )
        batch = await self.client.batch_annotate_images(requests=[request])
        response = batch.responses[0]

        if response.error.message:
            raise LabelDetectionError(f"Vision API error: {response.error.message}")

        return [label.description for label in response.label_annotations]

    async def close(self):
        await self.client.transport.close()

def create_label_detector(credentials_json: str = "") -> Optional[GoogleVisionLabelDetector]:
    """
    Builds the Vision-backed detector. Returns None when the client cannot be
    initialized, so requests fail with a service-unavailable error instead of
    the whole app refusing to start.
    """
    try:
        if credentials_json:
            info = json.loads(credentials_json)
            credentials = service_account.Credentials.from_service_account_info(info)
            client = vision.ImageAnnotatorAsyncClient(credentials=credentials)
        else:
            # Falls back to GOOGLE_APPLICATION_CREDENTIALS / metadata server
            client = vision.ImageAnnotatorAsyncClient()
    except (ValueError, DefaultCredentialsError) as e:
        logs.log(logging.ERROR, f"Vision client initialization failed: {str(e)}")
        return None

    logs.log(logging.INFO, "Vision label detector initialized")
    return GoogleVisionLabelDetector(client)
