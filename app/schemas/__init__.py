"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, LoginRequest, SuccessResponse
from app.schemas.health import HealthResponse
from app.schemas.ideas import IdeaAuthor, IdeaCreate, IdeaOut
from app.schemas.registration import (
    CompleteRegisterRequest,
    RegisterRequest,
    RegisterResponse,
    VerifyRequest,
)
from app.schemas.users import RoleChangeResponse, UserListItem

__all__ = [
    "CompleteRegisterRequest",
    "CurrentUser",
    "HealthResponse",
    "IdeaAuthor",
    "IdeaCreate",
    "IdeaOut",
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "RoleChangeResponse",
    "SuccessResponse",
    "UserListItem",
    "VerifyRequest",
]
