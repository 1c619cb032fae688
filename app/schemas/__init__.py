from app.schemas.auth import AuthResult, TokenData, UserData
from app.schemas.blog import (
    BlogCreate,
    BlogData,
    BlogPage,
    BlogResponse,
    BlogUpdate,
    Pagination,
    clean_tags,
)
from app.schemas.response import ApiResponse, MessageResponse
from app.schemas.user import (
    AuthorResponse,
    LoginRequest,
    SignupRequest,
    UserResponse,
    normalize_email,
)

__all__ = [
    "ApiResponse",
    "AuthResult",
    "AuthorResponse",
    "BlogCreate",
    "BlogData",
    "BlogPage",
    "BlogResponse",
    "BlogUpdate",
    "LoginRequest",
    "MessageResponse",
    "Pagination",
    "SignupRequest",
    "TokenData",
    "UserData",
    "UserResponse",
    "clean_tags",
    "normalize_email",
]
