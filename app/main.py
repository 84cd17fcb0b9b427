# app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.config.database import engine
from app.core.dependency_registration import register_services
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.middleware import setup_middleware
from app.core.registry import ServiceRegistry
from app.api.v1.router import api_router
from app.shared.database.models import Base
from app.shared.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting - version {settings.version}, API {settings.api_version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"Database: {settings.database_url.split('@')[-1]}")

    Base.metadata.create_all(bind=engine)

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")
    engine.dispose()

def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="Gestión de colmenas y secciones de colmena del almacén KatlaSport",
        docs_url="/docs",
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan
    )

    # Registro de servicios: se llena una vez y queda de solo lectura
    app.state.registry = register_services(ServiceRegistry()).freeze()

    setup_middleware(app)
    register_exception_handlers(app)

    # Versión 1.0 de la API bajo /api
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "message": settings.app_name,
            "version": settings.version,
            "api_version": settings.api_version,
            "status": "running",
            "environment": "production" if not settings.debug else "development",
            "docs": "/docs",
            "api": "/api"
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(
            status="healthy",
            app=settings.app_name,
            version=settings.version,
            api_version=settings.api_version,
            database="sqlite" if settings.is_sqlite else "postgresql"
        )

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
