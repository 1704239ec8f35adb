# app/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, ValidationError, field_validator
from typing import Optional

from app.core.errors import ConfigError

APP_VERSION = "1.0.0"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Comma-separated; unset means the built-in defaults in app.core.cors
    allowed_origins: Optional[str] = Field(default=None, alias="ALLOWED_ORIGINS")

    smtp_host: Optional[str] = Field(default=None, alias="SMTP_HOST")
    smtp_port: int = Field(default=587, alias="SMTP_PORT")
    smtp_secure: bool = Field(default=False, alias="SMTP_SECURE")
    smtp_user: Optional[str] = Field(default=None, alias="SMTP_USER")
    smtp_password: Optional[str] = Field(default=None, alias="SMTP_PASSWORD")
    smtp_verify: bool = Field(default=True, alias="SMTP_VERIFY")
    # seconds; None keeps smtplib's own default
    smtp_timeout: Optional[float] = Field(default=None, alias="SMTP_TIMEOUT")

    mail_from: Optional[str] = Field(default=None, alias="MAIL_FROM")
    contact_email: Optional[str] = Field(default=None, alias="CONTACT_EMAIL")

    @field_validator("smtp_port", "smtp_secure", "smtp_verify", "smtp_timeout", mode="before")
    @classmethod
    def _blank_is_default(cls, value, info):
        if isinstance(value, str) and not value.strip():
            return cls.model_fields[info.field_name].default
        return value


def get_settings() -> Settings:
    """Read configuration fresh from the environment.

    Used as a FastAPI dependency so every request sees the current env.
    """
    try:
        return Settings()
    except ValidationError as exc:
        keys = []
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else ""
            alias = Settings.model_fields[field].alias if field in Settings.model_fields else field
            if alias and alias not in keys:
                keys.append(alias)
        raise ConfigError(keys, reason="invalid") from exc


class ResumeSettings(BaseSettings):
    """Download settings, kept apart so a bad mail value cannot break /api/resume."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    resume_path: Optional[str] = Field(default=None, alias="RESUME_PATH")
    resume_filename: str = Field(default="Resume.pdf", alias="RESUME_FILENAME")


def get_resume_settings() -> ResumeSettings:
    return ResumeSettings()
