"""User administration: list (admin/superadmin), role toggle (superadmin), delete (admin/superadmin)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_user_admin_service, require_admin, require_superadmin
from app.schemas.auth import CurrentUser, SuccessResponse
from app.schemas.users import RoleChangeResponse, UserListItem
from app.services.users import UserAdminService

router = APIRouter()


@router.get("", response_model=list[UserListItem])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserAdminService, Depends(get_user_admin_service)],
) -> list[UserListItem]:
    """List all users without password hashes."""
    return [UserListItem.model_validate(u) for u in service.list_users()]


@router.put("/{user_id}/role", response_model=RoleChangeResponse)
def toggle_role(
    user_id: int,
    actor: Annotated[CurrentUser, Depends(require_superadmin)],
    service: Annotated[UserAdminService, Depends(get_user_admin_service)],
) -> RoleChangeResponse:
    """Toggle the target between 'user' and 'admin'."""
    new_role = service.toggle_admin_role(user_id, actor_id=actor.id)
    return RoleChangeResponse(new_role=new_role)


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: int,
    actor: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserAdminService, Depends(get_user_admin_service)],
) -> SuccessResponse:
    service.delete_user(user_id, actor_id=actor.id)
    return SuccessResponse()
