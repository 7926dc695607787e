"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.lms.api.http.app_data import ApplicationDependencies
from src.lms.api.http.routers import books, health, payment, users
from src.lms.api.utils.app_startup import configure_logging
from src.lms.core.services import DbManageService
from src.lms.runtime.config.config_data import ConfigData
from src.lms.runtime.context import get_config


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config: ConfigData = app.state.config
    logger.info("Starting up application in {} environment", config.app.environment)

    # Tests may wire their own dependencies before the app starts
    if getattr(app.state, "app_dependencies", None) is None:
        app.state.app_dependencies = ApplicationDependencies.build(config)

    deps: ApplicationDependencies = app.state.app_dependencies
    DbManageService(deps.database_service).create_all()


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except HTTPException as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=exc.status_code,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail, "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        except RequestValidationError as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=422,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.validation_error")
            return JSONResponse(
                status_code=422,
                content={"detail": exc.errors(), "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(
    config: ConfigData | None = None,
    dependencies: ApplicationDependencies | None = None,
) -> FastAPI:
    """Build the HTTP application.

    ``dependencies`` replaces the services wired at startup; pass it to run
    against a prepared database or a fake payment gateway.
    """
    config = config or get_config()
    is_production = config.app.environment == "production"

    app = FastAPI(
        title="Library Management Backend",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.config = config
    app.state.app_dependencies = dependencies

    # --- CORS configuration ---
    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    # --- Router registration ---
    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(users.router)
    app.include_router(payment.router)

    return app


def main() -> None:
    import uvicorn

    config = get_config()
    configure_logging(config)
    uvicorn.run(
        create_app(config),
        host=config.app.host,
        port=config.app.port,
        access_log=False,  # We handle access logging in middleware
    )


if __name__ == "__main__":
    main()
