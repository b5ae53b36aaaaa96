"""
Orbital Getaways API - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse, Response
import time
import logging

# Prometheus metrics
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST, REGISTRY

from orbital.config import Settings, get_settings
from orbital.errors import (
    AuthenticationError,
    ConflictError,
    InvalidArgumentError,
    InvalidTransitionError,
    NotFoundError,
)

# Define Prometheus metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

REQUEST_LATENCY = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint']
)
from orbital.routers import accommodations, bookings, destinations, health, packages, testimonials, users
from orbital.services.seed_data import seed_demo_data
from orbital.utils.redis import init_redis, close_redis
from orbital.utils.store import init_store, close_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager - the store lives exactly as long as the app
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")

    app.state.store = init_store()
    if settings.SEED_DEMO_DATA:
        logger.info("Seeding demo catalog...")
        seed_demo_data(app.state.store)

    app.state.cache = await init_redis(settings)

    logger.info(f"{settings.APP_NAME} ready to serve requests!")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")

    await close_redis(app.state.cache)
    close_store(app.state.store)

    logger.info("Cleanup completed")


def register_exception_handlers(app: FastAPI):
    """Map domain errors onto HTTP responses"""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info(f"{request.method} {request.url.path}: {exc.message} (id={exc.entity_id})")
        return ORJSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message, "entity": exc.entity, "id": exc.entity_id},
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return ORJSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition_handler(request: Request, exc: InvalidTransitionError):
        return ORJSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "detail": exc.message,
                "field": exc.field,
                "current": exc.current,
                "requested": exc.requested,
            },
        )

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return ORJSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        return ORJSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application. Each call gets its own store, created on startup.
    """
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
        ## Space Tourism Booking API

        Browse destinations, travel packages and accommodations, then book a trip.

        ### Features
        - 🚀 Destination, package and accommodation catalog
        - 💰 Server-side price quotes and totals
        - 📅 Bookings with a pending / confirmed / cancelled lifecycle
        - 👤 User registration and login
        """,
        version="1.0.0",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware with Prometheus metrics
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        # Record metrics (skip /metrics endpoint to avoid recursion)
        if request.url.path != "/metrics":
            endpoint = request.url.path
            method = request.method
            status_code = response.status_code

            REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status_code).inc()
            REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(process_time)

        response.headers["X-Process-Time"] = str(process_time)
        return response

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(destinations.router, prefix="/destinations", tags=["Destinations"])
    app.include_router(packages.router, prefix="/packages", tags=["Packages"])
    app.include_router(accommodations.router, prefix="/accommodations", tags=["Accommodations"])
    app.include_router(testimonials.router, prefix="/testimonials", tags=["Testimonials"])
    app.include_router(users.router, prefix="/users", tags=["Users"])
    app.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint - API information"""
        return {
            "name": settings.APP_NAME,
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs" if settings.DEBUG else "disabled",
        }

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Prometheus metrics endpoint"""
        return Response(
            content=generate_latest(REGISTRY),
            media_type=CONTENT_TYPE_LATEST
        )

    return app


app = create_app()
