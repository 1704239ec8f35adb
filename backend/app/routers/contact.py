# app/routers/contact.py
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.core.cors import ANY_METHOD, allow_methods
from app.core.mailer import MailConfig, SmtpTransport, Transport
from app.core.settings import Settings, get_settings
from app.lib.contact_submit import submit_contact

router = APIRouter(prefix="/api", tags=["contact"])


def get_transport_factory() -> Callable[[MailConfig], Transport]:
    return SmtpTransport


async def _read_payload(request: Request):
    try:
        return await request.json()
    except ValueError:
        # malformed or empty body; the validator reports it as invalid form data
        return None


async def contact_endpoint(
    request: Request,
    _: None = Depends(allow_methods("POST")),
    settings: Settings = Depends(get_settings),
    transport_factory: Callable[[MailConfig], Transport] = Depends(get_transport_factory),
):
    payload = await _read_payload(request)
    status, body = await run_in_threadpool(submit_contact, payload, settings, transport_factory)
    return JSONResponse(status_code=status, content=body)


router.add_api_route("/contact", contact_endpoint, methods=ANY_METHOD)
