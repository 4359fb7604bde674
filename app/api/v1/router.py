"""Main router for API v1."""

from fastapi import APIRouter

from app.api.v1.routes.dispatch import router as dispatch_router

api_router = APIRouter()

api_router.include_router(dispatch_router, tags=["dispatch"])
