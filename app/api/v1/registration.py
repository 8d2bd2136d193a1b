"""Signup endpoints: request a verification code, confirm it, complete the account."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_registration_service
from app.schemas.auth import SuccessResponse
from app.schemas.registration import (
    CompleteRegisterRequest,
    RegisterRequest,
    RegisterResponse,
    VerifyRequest,
)
from app.services.registration import RegistrationService

router = APIRouter()


@router.post("/register", response_model=RegisterResponse)
def register(
    body: RegisterRequest,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
) -> RegisterResponse:
    """
    Start registration: requires consent (agree=true) and an unused identity.
    Emails a 6-character code and returns the verification id (never the code).
    """
    verify_id = service.request_registration(body.username, body.password, body.agree)
    return RegisterResponse(verify_id=verify_id, message="Verification email sent.")


@router.post("/verify", response_model=SuccessResponse)
def verify(
    body: VerifyRequest,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
) -> SuccessResponse:
    """Check a code within its validity window; does not create the account."""
    service.confirm_code(body.verify_id, body.code)
    return SuccessResponse()


@router.post("/complete-register", response_model=SuccessResponse)
def complete_register(
    body: CompleteRegisterRequest,
    service: Annotated[RegistrationService, Depends(get_registration_service)],
) -> SuccessResponse:
    """Re-check the verification and create a verified account with role 'user'."""
    service.complete_registration(
        body.verify_id,
        body.username,
        body.password,
        display_name=body.display_name,
        code=body.code,
    )
    return SuccessResponse()
