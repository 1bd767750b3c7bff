"""
API router package.

Routers here organise endpoints by domain (lyrics, export, health).
"""

from fastapi import APIRouter

from . import export, health, lyrics


def create_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(lyrics.router, prefix="/lyrics", tags=["lyrics"])
    router.include_router(export.router, prefix="/export", tags=["export"])
    return router


__all__ = ["create_api_router"]
