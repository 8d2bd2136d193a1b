"""Schemas for user administration endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class RoleChangeResponse(BaseModel):
    """Result of the user/admin toggle."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    new_role: str = Field(..., alias="newRole")
