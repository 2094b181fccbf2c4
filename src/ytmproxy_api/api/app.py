"""FastAPI application factory and configuration."""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from functools import partial
from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.console import Console
from rich.logging import RichHandler
from ytmproxy import EndpointLimits, ExtractionConfig
from ytmproxy.providers import LazyProvider, get_provider_factory

from ytmproxy_api.api.container import Services
from ytmproxy_api.api.exceptions import register_exception_handlers
from ytmproxy_api.api.routes import (
    albums,
    artists,
    charts,
    health,
    playlists,
    search,
    songs,
    streams,
)
from ytmproxy_api.services import CatalogService, StreamService
from ytmproxy_api.settings import Settings, get_settings


def setup_logging() -> None:
    """Configure logging with Rich handler for all loggers including uvicorn."""
    settings = get_settings()
    console = Console(force_terminal=True)

    handler = RichHandler(
        console=console, rich_tracebacks=True, show_path=False, markup=False
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    # Configure root logger
    logging.root.handlers = [handler]
    logging.root.setLevel(settings.log_level)

    # Configure uvicorn loggers to use Rich
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False


setup_logging()
logger = logging.getLogger(__name__)


def create_services(settings: Settings) -> Services:
    """Create all application services with proper dependency wiring.

    The metadata provider is looked up by name here, so an unknown provider
    fails at startup; the client itself is built on first use.

    Args:
        settings: Application settings.

    Returns:
        Services container with all application services.
    """
    factory = partial(
        get_provider_factory(settings.metadata_provider),
        language=settings.language,
        location=settings.location,
    )
    provider = LazyProvider(factory)
    limits = EndpointLimits()

    catalog = CatalogService(
        provider=provider,
        timeout=settings.provider_timeout_seconds,
        limits=limits,
    )
    stream_service = StreamService(
        provider=provider,
        timeout=settings.extraction_timeout_seconds,
        player_clients=settings.ytdlp_player_clients,
        config=ExtractionConfig(),
    )

    return Services(
        settings=settings,
        provider=provider,
        catalog=catalog,
        streams=stream_service,
    )


def create_api_router() -> APIRouter:
    """Create the API router with all routes under /api prefix."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(health.router)
    api_router.include_router(search.router)
    api_router.include_router(albums.router)
    api_router.include_router(artists.router)
    api_router.include_router(playlists.router)
    api_router.include_router(songs.router)
    api_router.include_router(charts.router)
    api_router.include_router(streams.router)
    return api_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting application...")

    # Services may be provided up front (e.g. by tests)
    services: Services | None = getattr(app.state, "services", None)
    owned = services is None
    if services is None:
        services = create_services(get_settings())
        app.state.services = services
    logger.info("Services initialized")

    yield

    if owned:
        services.close()


async def add_open_cors_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Send the open CORS headers on every response, Origin or not."""
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    response.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
    return response


def _app_version() -> str:
    try:
        return version("ytmproxy")
    except PackageNotFoundError:
        return "0.0.0"


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ytmproxy",
        description="Normalizing proxy for YouTube Music metadata and streams",
        version=_app_version(),
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Register exception handlers
    register_exception_handlers(app)

    # CORS middleware (type ignore needed due to Starlette typing limitations)
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["Content-Type"],
    )
    # Open CORS headers also go on same-origin and non-browser responses
    if "*" in settings.cors_origins:
        app.middleware("http")(add_open_cors_headers)

    # API routes under /api prefix
    app.include_router(create_api_router())

    return app


# Create app instance for uvicorn
app = create_app()
