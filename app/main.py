# app/main.py

"""Blogging API - users, authentication and blog posts on FastAPI."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.status import HTTP_404_NOT_FOUND, HTTP_503_SERVICE_UNAVAILABLE
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.configs import settings
from app.db import ping
from app.errors import (
    BaseAppError,
    DatabaseConnectionError,
    DatabaseError,
    ForbiddenError,
    PasswordHashingError,
    RecordNotFoundError,
    UnauthenticatedError,
    auth_exception_handler,
    create_exception_handler,
    database_exception_handler,
    error_response,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from app.managers import limiter, rate_limit_exceeded_handler
from app.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from app.monitoring import get_logger
from app.routes import auth_router, blog_router
from app.utils.helpers import utc_now

logger = get_logger(__name__)

ROUTE_NOT_FOUND = "Route not found"

app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for users, authentication and blog posts",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
# Trust X-Forwarded-* from the reverse proxy so rate limits key on the client IP
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


routes = [auth_router, blog_router]

_ = [app.include_router(router) for router in routes]

app_exception_handler = create_exception_handler(logger)


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render Starlette HTTP errors (unknown routes, wrong methods) in the error envelope."""
    status_code = getattr(exc, "status_code", HTTP_404_NOT_FOUND)
    if status_code == HTTP_404_NOT_FOUND:
        message = ROUTE_NOT_FOUND
    else:
        message = str(getattr(exc, "detail", "")) or ROUTE_NOT_FOUND
    logger.info(message, status_code=status_code, path=request.url.path, method=request.method)
    return error_response(message, status_code)


errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RecordNotFoundError, database_exception_handler),
    (UnauthenticatedError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (BaseAppError, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, app_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter
limiter: Limiter = app.state.limiter


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "message": "Welcome to Blogging API"},
                },
            },
        },
    },
    operation_id="root_access",
)
@limiter.exempt
async def root(request: Request) -> ORJSONResponse:
    """
    Root endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Welcome message payload.
    """
    return ORJSONResponse(
        content={"success": True, "message": f"Welcome to {settings.APP_NAME}"},
    )


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "status": "ok",
                        "version": "1.0.0",
                        "environment": "development",
                        "database": "ok",
                        "timestamp": "2025-01-01T10:00:00Z",
                    },
                },
            },
        },
        503: {
            "description": "Database unreachable",
            "content": {
                "application/json": {
                    "example": {"success": False, "status": "degraded", "database": "unavailable"},
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request, response: Response) -> ORJSONResponse:
    """
    Liveness check including a database ping.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Current response context.

    Returns
    -------
    ORJSONResponse
        Service status; 503 when the database cannot be reached.
    """
    content = {
        "success": True,
        "status": "ok",
        "version": app.version,
        "environment": settings.ENVIRONMENT,
        "database": "ok",
        "timestamp": utc_now().isoformat(),
    }
    try:
        await ping()
    except DatabaseConnectionError:
        content.update(success=False, status="degraded", database="unavailable")
        return ORJSONResponse(content=content, status_code=HTTP_503_SERVICE_UNAVAILABLE)

    return ORJSONResponse(content=content)
