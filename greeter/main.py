"""Application entrypoint for the greeting service.

This module wires the FastAPI application together: it reads settings once,
builds the MessageProvider from them, and hands the provider to the greeting
route through the application state. `greeter.server.serve` builds its own
application; the module-level `app` exists for `uvicorn greeter.main:app` and
is only created when first looked up.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from greeter.api.routes import greeting_router
from greeter.core.config import Settings, get_settings
from greeter.core.logging import get_logger
from greeter.services.message import MessageProvider

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log readiness on startup and the stop on shutdown; no shared clients to dispose."""

    provider: MessageProvider = app.state.message_provider
    logger.info("Greeting service ready (message length: %d)", len(provider.get()))
    yield
    logger.info("Greeting service stopped")


async def catch_unhandled_errors(request: Request, call_next):
    """Answer unexpected failures with a bare 500 and keep the details in the log.

    The exception is handled here so it never reaches Starlette's server error
    middleware, which would log it a second time.
    """

    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Falls back to the cached environment-driven `settings` when none are given.
    - Constructs the MessageProvider exactly once and stores it on `app.state`.
    - Registers the greeting router and the generic 500 middleware.
    """

    if settings is None:
        settings = get_settings()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    application.state.message_provider = MessageProvider(settings.SERVICE_MESSAGE)

    application.middleware("http")(catch_unhandled_errors)
    application.include_router(greeting_router)

    return application


def __getattr__(name: str):
    """Build `app` from the environment on first access and keep it."""
    if name == "app":
        application = create_application()
        globals()["app"] = application
        return application
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
