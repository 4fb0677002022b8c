"""API version 1."""

from fastapi import APIRouter

from .srs import router as srs_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(srs_router)

__all__ = ["v1_router"]
