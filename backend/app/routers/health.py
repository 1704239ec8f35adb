# app/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.settings import APP_VERSION

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "contact": "/api/contact",
    "resume": "/api/resume",
    "status": "/api/status",
}


def status_payload() -> dict:
    return {
        "status": "ok",
        "message": "Portfolio Server API is running",
        "version": APP_VERSION,
        "endpoints": ENDPOINTS,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health")
async def health_root():
    return {"status": "ok"}


@router.get("/api/status")
async def api_status():
    return status_payload()
