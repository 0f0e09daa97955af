"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, completions, export, history, rule, settings, today

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    today.router, prefix="/today", tags=["Today"]
)
api_router.include_router(
    completions.router, prefix="/practices", tags=["Completions"]
)
api_router.include_router(
    rule.router, prefix="/rule", tags=["Rule"]
)
api_router.include_router(
    settings.router, prefix="/settings", tags=["Settings"]
)
api_router.include_router(
    history.router, prefix="/history", tags=["History"]
)
api_router.include_router(
    export.router, prefix="/export", tags=["Export"]
)
