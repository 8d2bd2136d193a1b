"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, health, ideas, registration, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(registration.router, tags=["registration"])
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(ideas.router, prefix="/ideas", tags=["ideas"])
