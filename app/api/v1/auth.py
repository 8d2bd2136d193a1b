"""Session login/logout and the current-session endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.deps import get_auth_service, get_current_user, get_session_token
from app.core.config import Settings, get_settings
from app.schemas.auth import CurrentUser, LoginRequest, SuccessResponse
from app.services.auth import AuthService

router = APIRouter()


@router.post("/login", response_model=SuccessResponse)
def login(
    body: LoginRequest,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SuccessResponse:
    """
    Authenticate with username and password; sets an HTTP-only session cookie.
    Unverified accounts are rejected with 403.
    """
    token, _ = service.login(body.username, body.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
        path="/",
        max_age=settings.SESSION_TTL_SECONDS,
    )
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    token: Annotated[str | None, Depends(get_session_token)],
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SuccessResponse:
    service.logout(token)
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
    return SuccessResponse()


@router.get("/me", response_model=CurrentUser)
def me(
    response: Response,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Return the session principal; never cached by the client."""
    response.headers["Cache-Control"] = "no-store"
    return current_user
