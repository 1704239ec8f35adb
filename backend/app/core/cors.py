# app/core/cors.py
import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request, Response

from app.core.errors import ConfigError, MethodNotAllowedError
from app.core.settings import get_settings

log = logging.getLogger("uvicorn.error")

DEFAULT_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "https://portfolio-ofki.vercel.app",
)
ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "X-Requested-With, Content-Type, Accept, Authorization"
# routes register these and gate inside the handler; OPTIONS is answered by the
# middleware before routing
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


def parse_allowed_origins(raw: Optional[str]) -> list[str]:
    if raw is None:
        return list(DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def cors_headers(origin: Optional[str], allowed: Iterable[str]) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }
    if origin and origin in allowed:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers


def _allowed_for(request: Request) -> list[str]:
    # honour app.dependency_overrides so tests can swap settings
    provider = request.app.dependency_overrides.get(get_settings, get_settings)
    try:
        return parse_allowed_origins(provider().allowed_origins)
    except ConfigError as exc:
        log.warning(f"[cors] falling back to default origins: {exc}")
        return list(DEFAULT_ORIGINS)


def install_cors(app: FastAPI) -> None:
    @app.middleware("http")
    async def cors_gate(request: Request, call_next):
        headers = cors_headers(request.headers.get("origin"), _allowed_for(request))
        if request.method == "OPTIONS":
            # preflight: answer before any routing or body handling
            return Response(status_code=200, headers=headers)
        response = await call_next(request)
        response.headers.update(headers)
        return response


def require_method(request: Request, *allowed: str) -> None:
    if request.method not in allowed:
        raise MethodNotAllowedError(request.method, allowed)


def allow_methods(*allowed: str):
    """Method gate as a dependency; declare it ahead of any dependency that can fail."""

    async def _gate(request: Request) -> None:
        require_method(request, *allowed)

    return _gate
