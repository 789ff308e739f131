import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from wastewise.core.config import settings
from wastewise.core.exceptions import (
    WasteWiseError,
    http_exception_handler,
    request_validation_exception_handler,
    unhandled_exception_handler,
    wastewise_exception_handler,
)
from wastewise.core.logger import logs
from wastewise.core.middleware import BodySizeLimitMiddleware
from wastewise.repos.places_repo import GooglePlacesSearch
from wastewise.repos.vision_repo import create_label_detector
from wastewise.routes.waste_route import router as waste_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Shared, read-only collaborator handles for all requests
    app.state.label_detector = create_label_detector(settings.GOOGLE_CLOUD_VISION_CREDENTIALS)
    http_client = httpx.AsyncClient()
    app.state.places_search = GooglePlacesSearch(
        http_client,
        api_key=settings.GOOGLE_MAPS_API_KEY,
        base_url=settings.PLACES_NEARBY_URL,
        timeout=settings.PLACES_TIMEOUT_SECONDS,
    )
    if not settings.GOOGLE_MAPS_API_KEY:
        logs.log(logging.WARNING, "GOOGLE_MAPS_API_KEY is not set, venue lookups will fail")

    yield

    await http_client.aclose()
    if app.state.label_detector is not None:
        await app.state.label_detector.close()
    logs.log(logging.INFO, "Collaborator clients closed")

app = FastAPI(title="WasteWise API", lifespan=lifespan)

# Last added runs outermost: CORS headers are applied to 413s from the size guard too
app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.add_exception_handler(WasteWiseError, wastewise_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.include_router(waste_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": "Server is running",
        "endpoints": {
            "health": "/api/health",
            "classify": "/api/classify-waste",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/api/health")
async def health_check(request: Request):
    detector = getattr(request.app.state, "label_detector", None)
    return {
        "status": "ok",
        "service": "WasteWise API",
        "labelDetection": "ready" if detector is not None else "unavailable",
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("wastewise.main:app", host=settings.HOST, port=settings.PORT, reload=True)
