# app/core/mailer.py
import html
import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Callable, Optional, Protocol

from app.core.errors import ConfigError, SendError, TransportError
from app.core.settings import Settings
from app.lib.contact import ContactMessage

log = logging.getLogger("uvicorn.error")

DEFAULT_SMTP_PORT = 587
IMPLICIT_TLS_PORT = 465

# checked in this order so error messages are stable
REQUIRED_KEYS = ("SMTP_HOST", "SMTP_USER", "SMTP_PASSWORD", "CONTACT_EMAIL")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class MailConfig:
    host: Optional[str]
    user: Optional[str]
    password: Optional[str]
    to_address: Optional[str]
    port: int = DEFAULT_SMTP_PORT
    secure: bool = False
    from_address: Optional[str] = None
    verify: bool = True
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailConfig":
        port = settings.smtp_port or DEFAULT_SMTP_PORT
        return cls(
            host=settings.smtp_host,
            user=settings.smtp_user,
            password=settings.smtp_password,
            to_address=settings.contact_email,
            port=port,
            secure=settings.smtp_secure or port == IMPLICIT_TLS_PORT,
            from_address=None if _blank(settings.mail_from) else settings.mail_from,
            verify=settings.smtp_verify,
            timeout=settings.smtp_timeout,
        )

    @property
    def sender(self) -> Optional[str]:
        return self.from_address or self.user

    def missing_keys(self) -> list[str]:
        values = {
            "SMTP_HOST": self.host,
            "SMTP_USER": self.user,
            "SMTP_PASSWORD": self.password,
            "CONTACT_EMAIL": self.to_address,
        }
        return [key for key in REQUIRED_KEYS if _blank(values[key])]


class Transport(Protocol):
    def verify(self) -> None: ...

    def send(self, msg: EmailMessage) -> None: ...


class SmtpTransport:
    """One-shot SMTP client; every call opens and closes its own session."""

    def __init__(self, config: MailConfig):
        self.config = config

    def _connect(self) -> smtplib.SMTP:
        cfg = self.config
        kwargs = {} if cfg.timeout is None else {"timeout": cfg.timeout}
        context = ssl.create_default_context()
        if cfg.secure:
            smtp = smtplib.SMTP_SSL(cfg.host, cfg.port, context=context, **kwargs)
        else:
            smtp = smtplib.SMTP(cfg.host, cfg.port, **kwargs)
        try:
            if not cfg.secure:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls(context=context)
                    smtp.ehlo()
            smtp.login(cfg.user, cfg.password)
        except Exception:
            smtp.close()
            raise
        return smtp

    def verify(self) -> None:
        smtp = self._connect()
        try:
            smtp.noop()
        finally:
            smtp.quit()

    def send(self, msg: EmailMessage) -> None:
        with self._connect() as smtp:
            smtp.send_message(msg)


def render_body(message: ContactMessage) -> str:
    name = html.escape(message.name, quote=False)
    email = html.escape(message.email, quote=False)
    text = html.escape(message.message, quote=False)
    text = text.replace("\r\n", "\n").replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>\n"
        f"<p><strong>Name:</strong> {name}</p>\n"
        f"<p><strong>Email:</strong> {email}</p>\n"
        "<p><strong>Message:</strong></p>\n"
        f"<p>{text}</p>\n"
        "<hr>\n"
        "<p><em>Sent from your portfolio website contact form</em></p>\n"
    )


def compose_message(config: MailConfig, message: ContactMessage) -> EmailMessage:
    msg = EmailMessage()
    # header values may not carry line breaks
    sender_name = " ".join(message.name.split())
    msg["Subject"] = f"Portfolio Contact: Message from {sender_name}"
    msg["From"] = config.sender
    msg["To"] = config.to_address
    msg["Reply-To"] = message.email
    msg.set_content(render_body(message), subtype="html")
    return msg


class MailDispatcher:
    def __init__(
        self,
        config: MailConfig,
        transport_factory: Callable[[MailConfig], Transport] = SmtpTransport,
    ):
        self.config = config
        self.transport_factory = transport_factory

    def dispatch(self, message: ContactMessage) -> None:
        """Relay a validated contact message; one attempt, no retries."""
        missing = self.config.missing_keys()
        if missing:
            raise ConfigError(missing)

        transport = self.transport_factory(self.config)

        if self.config.verify:
            try:
                transport.verify()
            except Exception as exc:
                log.error(f"[mail] SMTP verify failed for {self.config.host}:{self.config.port}", exc_info=True)
                raise TransportError(str(exc)) from exc

        msg = compose_message(self.config, message)
        try:
            transport.send(msg)
        except Exception as exc:
            log.error(f"[mail] send failed via {self.config.host}:{self.config.port}", exc_info=True)
            raise SendError(str(exc)) from exc

        log.info(f"[mail] contact message relayed to {self.config.to_address}")
