# app/core/web.py
from fastapi import FastAPI

from app.core.cors import install_cors
from app.core.errors import register_exception_handlers


def configure_app(app: FastAPI) -> FastAPI:
    """Attach the shared CORS gate and error envelopes to an app."""
    register_exception_handlers(app)
    install_cors(app)
    return app
