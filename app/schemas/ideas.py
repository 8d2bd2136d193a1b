"""Schemas for idea endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class IdeaCreate(BaseModel):
    """New idea; author and date are assigned by the server."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=10000)


class IdeaAuthor(BaseModel):
    """Author identity; username is null when the author has been deleted."""

    username: str | None = None


class IdeaOut(BaseModel):
    """Idea joined with its author's username."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    date: str
    user_id: int | None = Field(default=None, alias="userId")
    user: IdeaAuthor
