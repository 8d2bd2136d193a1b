"""Idea endpoints: list and create for any session, delete for admin/superadmin."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_current_user, get_idea_service, require_admin
from app.schemas.auth import CurrentUser, SuccessResponse
from app.schemas.ideas import IdeaCreate, IdeaOut
from app.services.ideas import IdeaService

router = APIRouter()


@router.get("", response_model=list[IdeaOut])
def list_ideas(
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
) -> list[IdeaOut]:
    """All ideas with author username; ideas of deleted authors have a null username."""
    return service.list_ideas()


@router.post("", response_model=SuccessResponse)
def create_idea(
    body: IdeaCreate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
) -> SuccessResponse:
    service.create_idea(body.title, body.description, author_id=user.id)
    return SuccessResponse()


@router.delete("/{idea_id}", response_model=SuccessResponse)
def delete_idea(
    idea_id: int,
    actor: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[IdeaService, Depends(get_idea_service)],
) -> SuccessResponse:
    service.delete_idea(idea_id, actor_id=actor.id)
    return SuccessResponse()
