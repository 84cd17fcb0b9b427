from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import time
import logging

from app.config.settings import settings
from app.core.exceptions import unexpected_error_response

logger = logging.getLogger(__name__)

API_VERSION_HEADER = "api-supported-versions"

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # El último middleware registrado es el más externo: CORS envuelve al
    # log para que también los 500 lleven sus headers
    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as exc:
            response = unexpected_error_response(request, exc)

        process_time = time.time() - start_time
        response.headers[API_VERSION_HEADER] = settings.api_version
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    # CORS - cualquier origen, header y método, sin credenciales
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
