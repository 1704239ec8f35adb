# app/core/errors.py
import logging
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger("uvicorn.error")

TRANSPORT_ERROR_MESSAGE = "Email service is not configured correctly. Please try again later."
SEND_ERROR_MESSAGE = "Failed to send message. Please try again later."


class MethodNotAllowedError(Exception):
    """Request used a method the endpoint does not serve."""

    status_code = 405

    def __init__(self, method: str, allowed: Iterable[str]):
        self.method = method
        self.allowed = tuple(allowed)
        super().__init__("Method not allowed")


class DispatchError(Exception):
    """Base for failures while turning a contact message into an email."""

    status_code = 500
    public_message = SEND_ERROR_MESSAGE


class ConfigError(DispatchError):
    """Required mail settings are missing or unparsable.

    Only the env key names are carried into the message, never their values.
    """

    def __init__(self, keys: Iterable[str], reason: str = "missing"):
        self.keys = list(keys)
        self.reason = reason
        if reason == "missing":
            text = f"Server email configuration is incomplete. Missing: {', '.join(self.keys)}"
        else:
            text = f"Server email configuration is invalid: {', '.join(self.keys)}"
        super().__init__(text)

    @property
    def public_message(self) -> str:
        return str(self)


class TransportError(DispatchError):
    """The SMTP relay could not be reached or rejected our credentials."""

    public_message = TRANSPORT_ERROR_MESSAGE


class SendError(DispatchError):
    """The relay failed to accept the composed message."""

    public_message = SEND_ERROR_MESSAGE


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MethodNotAllowedError)
    async def _method_not_allowed(request: Request, exc: MethodNotAllowedError):
        return JSONResponse(
            status_code=405,
            content=error_body("Method not allowed"),
            headers={"Allow": ", ".join(exc.allowed + ("OPTIONS",))},
        )

    @app.exception_handler(ConfigError)
    async def _config_error(request: Request, exc: ConfigError):
        log.error(f"[config] {exc}")
        return JSONResponse(status_code=500, content=error_body(exc.public_message))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        # router-level 405s share the envelope of the handler-level ones
        if exc.status_code == 405:
            return JSONResponse(
                status_code=405,
                content=error_body("Method not allowed"),
                headers=exc.headers,
            )
        return await http_exception_handler(request, exc)
