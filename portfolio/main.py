# portfolio/main.py
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uuid

from portfolio.api.response import error_response
from portfolio.core.config import settings
from portfolio.core.exceptions import PortfolioError, StorageError, ValidationError
from portfolio.core.logging import setup_logging, set_request_id
from portfolio.core.metrics import PrometheusMiddleware, metrics_endpoint
from portfolio.db import database
from portfolio.db.schema import create_schema
from portfolio.middleware.auth import AdminLoginRequired

# Initialize structured logging
setup_logging(
    log_level=settings.LOG_LEVEL,
    enable_sentry=bool(settings.SENTRY_DSN and settings.SENTRY_DSN.strip()),
    sentry_dsn=settings.SENTRY_DSN
)

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and release it on shutdown."""
    logger.info("Portfolio CMS starting up")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    try:
        db = await database.connect_to_database()
    except Exception as e:
        logger.critical(f"Database connection failed, aborting startup: {str(e)}")
        raise RuntimeError("Cannot start application without a database") from e

    if settings.AUTO_CREATE_SCHEMA:
        await create_schema(db)

    logger.info("Application startup complete")
    yield

    logger.info("Application shutting down")
    await database.close_database_connection()


# Create FastAPI application
app = FastAPI(
    title="Portfolio CMS",
    version="1.0.0",
    description="Personal portfolio site with an admin panel and JSON API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

Path(settings.PUBLIC_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/public", StaticFiles(directory=settings.PUBLIC_DIR), name="public")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600
)

app.add_middleware(PrometheusMiddleware)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Add unique request ID to each request for tracing."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_request_id(request_id)

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


@app.exception_handler(PortfolioError)
async def portfolio_exception_handler(request: Request, exc: PortfolioError):
    if isinstance(exc, StorageError):
        # Details were logged by the repository
        return error_response(exc.status_code, exc.message)

    errors = {"field": exc.field} if isinstance(exc, ValidationError) and exc.field else None
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.message, errors)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any(error.get("loc", ("",))[0] == "path" for error in errors):
        message = "Invalid ID"
    else:
        message = "Invalid request body"
    logger.info(f"{request.method} {request.url.path}: {message}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        [{"loc": list(error.get("loc", ())), "msg": error.get("msg")} for error in errors],
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(AdminLoginRequired)
async def admin_login_required_handler(request: Request, exc: AdminLoginRequired):
    return RedirectResponse("/page401", status_code=status.HTTP_303_SEE_OTHER)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status, including database reachability
    """
    db_ok = await database.health_check()
    return {
        "status": "healthy" if db_ok else "degraded",
        "database": "ok" if db_ok else "unavailable",
        "version": "1.0.0",
        "service": "portfolio-cms"
    }


# Metrics endpoint
@app.get("/metrics", tags=["Metrics"])
async def metrics():
    """
    Prometheus metrics endpoint.

    Returns:
        Prometheus metrics in text format
    """
    return metrics_endpoint()


# Include routers
from portfolio.api.v1 import auth, contact, content, profile, upload
from portfolio.api.v1 import portfolio as portfolio_api
from portfolio.web import admin, public

app.include_router(portfolio_api.router, prefix="/api/v1", tags=["Portfolio"])
app.include_router(profile.router, prefix="/api/v1/profile", tags=["Profile"])
app.include_router(content.experiences_router, prefix="/api/v1/experiences", tags=["Experiences"])
app.include_router(content.skills_router, prefix="/api/v1/skills", tags=["Skills"])
app.include_router(content.projects_router, prefix="/api/v1/projects", tags=["Projects"])
app.include_router(content.publications_router, prefix="/api/v1/publications", tags=["Publications"])
app.include_router(contact.router, prefix="/api/v1", tags=["Contact"])
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Authentication"])
app.include_router(upload.router, prefix="/api/v1", tags=["Upload"])
app.include_router(public.router)
app.include_router(admin.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
        log_level="info"
    )
