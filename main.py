from __future__ import annotations

import logging
from logging.config import dictConfig
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from api.router import api_router
from core.config import settings
from db.database import close_database, connect_database
from repositories.base import StoreFailure


def configure_logging() -> None:
    level = settings.log_level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                    "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "level": level,
                }
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )


configure_logging()
logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request.validation_failed", extra={"path": str(request.url.path), "error_count": len(exc.errors())})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": jsonable_encoder(exc.errors(), custom_encoder={ValueError: str})},
    )


async def _store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    # Cause already logged by the repository; callers only see an opaque error
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Server Error"})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request.unhandled_error", extra={"method": request.method, "path": str(request.url.path)})
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Server Error"})


def create_app() -> FastAPI:
    app = FastAPI(title="Service Booking API", version="0.1.0")

    origins_env = settings.allowed_origins.strip()
    allow_all_origins = origins_env in {"*", '"*"'}
    if allow_all_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        allowed_origins = [o.strip() for o in origins_env.split(",") if o.strip()]
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StoreFailure, _store_failure_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(api_router)

    @app.on_event("startup")
    async def _open_database() -> None:
        await connect_database()

    @app.on_event("shutdown")
    async def _close_database() -> None:
        await close_database()

    @app.get("/", response_class=PlainTextResponse)
    async def root_health() -> str:
        return "Server is running!"

    logger.info("Application initialized")
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
