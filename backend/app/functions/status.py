# app/functions/status.py
from fastapi import FastAPI, Request

from app.core.cors import ANY_METHOD, require_method
from app.core.settings import APP_VERSION
from app.core.web import configure_app
from app.routers.health import status_payload

app = configure_app(FastAPI(title="Portfolio status function", version=APP_VERSION))


@app.api_route("/{path:path}", methods=ANY_METHOD)
async def status_function(request: Request):
    require_method(request, "GET", "HEAD")
    return status_payload()
