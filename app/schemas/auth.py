"""Request/response schemas for login, logout and the current session."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Login identity (email)")
    password: str = Field(..., min_length=1, max_length=128, description="Password")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return v.strip()


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = Field(default=True)


class CurrentUser(BaseModel):
    """Session principal (id, username, role) copied from the user at login time."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
