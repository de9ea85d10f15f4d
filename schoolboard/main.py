import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from schoolboard.api.attendance.router import router as attendance_router
from schoolboard.api.auth.router import router as auth_router
from schoolboard.api.behavior_reports.router import router as behavior_reports_router
from schoolboard.api.dashboard.router import router as dashboard_router
from schoolboard.api.notifications.router import router as notifications_router
from schoolboard.api.students.router import router as students_router
from schoolboard.api.surveys.router import router as surveys_router
from schoolboard.core.config import Settings, resolve_jwt_secret, settings
from schoolboard.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_message(exc)},
    )


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Unhandled storage error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(config: Settings = settings) -> FastAPI:
    setup_logging(config.log_level, config.log_file)
    # Fail at startup, not on the first login, when production has no signing key.
    resolve_jwt_secret(config)

    app = FastAPI(title="SchoolBoard API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)

    # Routers
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(students_router)
    app.include_router(attendance_router)
    app.include_router(behavior_reports_router)
    app.include_router(notifications_router)
    app.include_router(surveys_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    logger.info("SchoolBoard API configured (env=%s)", config.app_env)
    return app


app = create_app()
