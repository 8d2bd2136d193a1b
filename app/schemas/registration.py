"""Request/response schemas for the register / verify / complete-register flow."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)


def _validate_email_identity(v: str) -> str:
    v = v.strip()
    local, _, domain = v.rpartition("@")
    if not local or "." not in domain or domain.startswith(".") or domain.endswith("."):
        raise ValueError("username must be a valid email address")
    return v


class RegisterRequest(BaseModel):
    """Step 1: identity (email), password and personal-data consent."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    agree: bool = Field(default=False, description="Consent to personal data collection")

    @model_validator(mode="before")
    @classmethod
    def require_consent(cls, data):
        # Consent is checked before any field.
        if isinstance(data, dict) and data.get("agree") is not True:
            raise PydanticCustomError(
                "consent_required", "Consent to personal data collection is required"
            )
        return data

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _validate_email_identity(v)


class RegisterResponse(BaseModel):
    """Verification id to echo back in /verify and /complete-register."""

    model_config = ConfigDict(populate_by_name=True)

    verify_id: str = Field(..., alias="verifyId")
    message: str


class VerifyRequest(BaseModel):
    """Step 2: check the emailed code without creating the account."""

    model_config = ConfigDict(populate_by_name=True)

    verify_id: str = Field(..., alias="verifyId", min_length=1, max_length=64)
    code: str = Field(..., min_length=1, max_length=32)


class CompleteRegisterRequest(BaseModel):
    """Step 3: create the account once the verification is still valid."""

    model_config = ConfigDict(populate_by_name=True)

    verify_id: str = Field(..., alias="verifyId", min_length=1, max_length=64)
    code: str | None = Field(default=None, max_length=32)
    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    display_name: str | None = Field(default=None, alias="displayName", max_length=255)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _validate_email_identity(v)
