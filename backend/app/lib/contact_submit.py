import json
import logging
from typing import Any, Callable

from pydantic import ValidationError

from app.core.errors import ConfigError, DispatchError, error_body
from app.core.mailer import MailConfig, MailDispatcher, SmtpTransport, Transport
from app.core.settings import Settings
from app.lib.contact import validate_contact

log = logging.getLogger("uvicorn.error")

SUCCESS_MESSAGE = "Message sent successfully!"
INVALID_MESSAGE = "Invalid form data"


def submit_contact(
    payload: Any,
    settings: Settings,
    transport_factory: Callable[[MailConfig], Transport] = SmtpTransport,
) -> tuple[int, dict]:
    """Validate a contact form payload and relay it by email.

    Returns (status_code, body). Blocking: run it off the event loop.
    """
    try:
        message = validate_contact(payload)
    except ValidationError as exc:
        log.info(f"[contact] rejected submission: {exc.error_count()} invalid field(s)")
        body = error_body(INVALID_MESSAGE)
        body["errors"] = json.loads(exc.json(include_url=False))
        return 400, body

    dispatcher = MailDispatcher(MailConfig.from_settings(settings), transport_factory)
    try:
        dispatcher.dispatch(message)
    except ConfigError as exc:
        log.error(f"[contact] {exc}")
        return exc.status_code, error_body(exc.public_message)
    except DispatchError as exc:
        return exc.status_code, error_body(exc.public_message)

    return 200, {"success": True, "message": SUCCESS_MESSAGE}
