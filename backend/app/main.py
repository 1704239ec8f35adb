# app/main.py
from fastapi import FastAPI
from fastapi.routing import APIRoute
import logging

from app.core.settings import APP_VERSION
from app.core.web import configure_app
from app.routers.contact import router as contact_router
from app.routers.health import router as health_router
from app.routers.resume import router as resume_router

app = FastAPI(title="Portfolio Server API", version=APP_VERSION)
configure_app(app)

# Routers
app.include_router(contact_router)
app.include_router(resume_router)
app.include_router(health_router)

logging.getLogger("uvicorn.error").info(
    f"[main] routes = {sorted(r.path for r in app.routes if isinstance(r, APIRoute))}"
)
