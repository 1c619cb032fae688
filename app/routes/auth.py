"""Authentication routes for user registration, login and identity."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from app.dependencies import AuthServiceDep, UserDBDep
from app.managers import LOGIN_LIMIT, SIGNUP_LIMIT, limiter
from app.schemas import (
    ApiResponse,
    AuthResult,
    LoginRequest,
    SignupRequest,
    UserData,
)

router = APIRouter(prefix="/api/auth", tags=["🔐 Auth"])

AUTH_RESULT_EXAMPLE = {
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "createdAt": "2025-01-01T10:00:00Z",
    },
    "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
}
RATE_LIMITED = {
    "description": "Rate limit exceeded",
    "content": {
        "application/json": {
            "example": {"success": False, "message": "Rate limit exceeded: 5 per 1 minute"},
        },
    },
}


@router.post(
    "/signup",
    response_class=ORJSONResponse,
    response_model=ApiResponse[AuthResult],
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create an account and receive an access token.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "User registered successfully",
                        "data": AUTH_RESULT_EXAMPLE,
                    },
                },
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"success": False, "message": "Email already registered"},
                },
            },
        },
        429: RATE_LIMITED,
    },
    operation_id="auth_signup",
)
@limiter.limit(SIGNUP_LIMIT)
async def signup(
    request: Request,
    response: Response,
    payload: SignupRequest,
    auth_service: AuthServiceDep,
) -> ApiResponse[AuthResult]:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    payload : SignupRequest
        Names, email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    ApiResponse[AuthResult]
        The new user and an access token.

    Raises
    ------
    DuplicateEntryError
        If the email is already registered.
    """
    result = await auth_service.signup(payload)
    return ApiResponse(message="User registered successfully", data=result)


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=ApiResponse[AuthResult],
    summary="Login for access token",
    description="Authenticate with email and password to obtain an access token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Login successful",
                        "data": AUTH_RESULT_EXAMPLE,
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"success": False, "message": "Invalid email or password"},
                },
            },
        },
        429: RATE_LIMITED,
    },
    operation_id="auth_login",
)
@limiter.limit(LOGIN_LIMIT)
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    auth_service: AuthServiceDep,
) -> ApiResponse[AuthResult]:
    """
    Login with email and password.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    payload : LoginRequest
        Email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    ApiResponse[AuthResult]
        The user and an access token.

    Raises
    ------
    InvalidCredentialsError
        If authentication fails.
    """
    result = await auth_service.login(payload)
    return ApiResponse(message="Login successful", data=result)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=ApiResponse[UserData],
    summary="Get current user",
    description="Return the user identified by the bearer token.",
    responses={
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"success": False, "message": "Access denied. No token provided."},
                },
            },
        },
    },
    operation_id="auth_me",
)
async def read_current_user(
    user: UserDBDep,
    auth_service: AuthServiceDep,
) -> ApiResponse[UserData]:
    """
    Get the authenticated user.

    Parameters
    ----------
    user : UserDB
        Current user from the bearer token.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    ApiResponse[UserData]
        The user without sensitive fields.
    """
    current = await auth_service.get_current_user(user.id)
    return ApiResponse(data=UserData(user=current))
