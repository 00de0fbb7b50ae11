"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from passguard.api.health import router as health_router
from passguard.api.passwords import router as passwords_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Password validation
api_router.include_router(passwords_router, tags=["Passwords"])
