import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from gateway.authentication.password_hasher import PasswordHasher
from gateway.context import GatewayContext
from gateway.converter import BoardConverter
from gateway.db import create_engine, create_session_factory, create_tables
from gateway.errors import GatewayError, RequestValidationFailed
from gateway.load_secrets import GatewaySettings, load_settings
from gateway.routers.game import game_router
from gateway.routers.users import user_router
from gateway.services.game_engine import GameEngineClient


def configure_logging(settings: GatewaySettings) -> None:
    logging.basicConfig(level=settings.log_level.upper())
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def register_exception_handlers(app: FastAPI) -> None:
    """Every failure leaves the gateway as ``{"error": message}``."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Bodies that are not JSON at all never reach the request schemas.
        error = RequestValidationFailed()
        logging.info(f"Rejected request to {request.url.path}: {error.message}")
        return await gateway_error_handler(request, error)


def register_error_middleware(app: FastAPI) -> None:
    """Turn any unexpected exception into a 500 JSON body.

    Must be added before CORSMiddleware so that CORS wraps these responses too.
    """

    @app.middleware("http")
    async def unexpected_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logging.exception(f"Unexpected error on {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )


def create_app(
    settings: GatewaySettings | None = None,
    engine_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the gateway application.

    The application is stateless towards clients: the lifespan builds the
    credential store engine and the game engine client once, and handlers only
    read them through GatewayContext.

    Args:
        settings (GatewaySettings | None): Configuration, read from the environment if omitted
        engine_transport (httpx.AsyncBaseTransport | None): Transport for the engine client, e.g. a fake engine

    Returns:
        FastAPI: The configured application
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = create_engine(settings.database_url)
        await create_tables(db_engine)
        engine_client = GameEngineClient(
            settings.engine_url,
            timeout=settings.engine_timeout,
            transport=engine_transport,
        )
        app.state.context = GatewayContext(
            settings=settings,
            session_factory=create_session_factory(db_engine),
            engine_client=engine_client,
            hasher=PasswordHasher(settings.hash_iterations, settings.pepper_data),
            converter=BoardConverter(settings.engine_board_key, settings.board_topology),
        )
        logging.info(f"Gateway started, game engine at {settings.engine_url}")
        try:
            yield
        finally:
            await engine_client.aclose()
            await db_engine.dispose()
            logging.info("Stop Server")

    app = FastAPI(title="Game Gateway", lifespan=lifespan)
    register_error_middleware(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)
    app.include_router(user_router)
    app.include_router(game_router)
    return app


if __name__ == "__main__":
    settings = load_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
