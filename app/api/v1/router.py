# app/api/v1/router.py
from fastapi import APIRouter
from app.config.settings import settings
from app.modules.hives.router import router as hives_router
from app.modules.hive_sections.router import router as hive_sections_router

# Router de la API v1.0
api_router = APIRouter()

api_router.include_router(
    hives_router,
    prefix="/hives",
    tags=["Hives"]
)

api_router.include_router(
    hive_sections_router,
    prefix="/sections",
    tags=["Hive Sections"]
)

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": f"{settings.app_name} v{settings.api_version}",
        "version": settings.version,
        "api_version": settings.api_version,
        "docs": "/docs",
        "available_endpoints": {
            "hives": "/api/hives",
            "sections": "/api/sections"
        }
    }
