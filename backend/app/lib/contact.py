from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ContactMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    message: str = Field(min_length=5, max_length=1000)

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _strip(cls, value, info):
        # trim before the length checks run
        if not isinstance(value, str):
            return value
        value = value.strip()
        # EmailStr would quietly unwrap "Name <addr>"; only a bare address is accepted
        if info.field_name == "email" and ("<" in value or ">" in value):
            raise ValueError("Invalid email address")
        return value


def validate_contact(payload: Any) -> ContactMessage:
    """Turn an untyped request payload into a ContactMessage.

    Raises pydantic.ValidationError listing every failing field.
    """
    return ContactMessage.model_validate(payload)
