# consultas/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from consultas.api.routers import consultas
from consultas.api.routers.health import router as health_router
from consultas.domain.errors import DataAccessError
from consultas.utils.logging import get_logger

logger = get_logger(__name__)


async def data_access_error_handler(request: Request, exc: DataAccessError):
    logger.error(f"{request.method} {request.url.path} -> 500: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Error de acceso a datos"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Consultas Service",
        version="1.0.0",
    )

    app.add_exception_handler(DataAccessError, data_access_error_handler)

    # Include routers
    app.include_router(health_router)
    app.include_router(consultas.router)

    return app
