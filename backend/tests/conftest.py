# backend/tests/conftest.py
import pytest

from app.core.settings import Settings

ENV_KEYS = [
    "ALLOWED_ORIGINS",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_SECURE",
    "SMTP_USER",
    "SMTP_PASSWORD",
    "SMTP_VERIFY",
    "SMTP_TIMEOUT",
    "MAIL_FROM",
    "CONTACT_EMAIL",
    "RESUME_PATH",
    "RESUME_FILENAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the developer's shell env and any .env file out of the tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def make_settings(**overrides) -> Settings:
    values = {
        "SMTP_HOST": "smtp.example.com",
        "SMTP_USER": "bot@example.com",
        "SMTP_PASSWORD": "s3cret-pass",
        "CONTACT_EMAIL": "owner@example.com",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeTransport:
    def __init__(self, factory, config):
        self.factory = factory
        self.config = config

    def verify(self):
        self.factory.verified += 1
        if self.factory.verify_error:
            raise self.factory.verify_error

    def send(self, msg):
        self.factory.sent.append(msg)
        if self.factory.send_error:
            raise self.factory.send_error


class FakeTransportFactory:
    """Stands in for SmtpTransport; records what would have gone out."""

    def __init__(self):
        self.built = []
        self.sent = []
        self.verified = 0
        self.verify_error = None
        self.send_error = None

    def __call__(self, config):
        self.built.append(config)
        return FakeTransport(self, config)


@pytest.fixture
def transport():
    return FakeTransportFactory()


@pytest.fixture
def settings():
    return make_settings()
