# app/functions/contact.py
# Standalone deployment of the contact handler: `uvicorn app.functions.contact:app`
# serves the same contract as POST /api/contact on every path.
from fastapi import FastAPI

from app.core.cors import ANY_METHOD
from app.core.settings import APP_VERSION
from app.core.web import configure_app
from app.routers.contact import contact_endpoint

app = configure_app(FastAPI(title="Portfolio contact function", version=APP_VERSION))
app.add_api_route("/{path:path}", contact_endpoint, methods=ANY_METHOD)
