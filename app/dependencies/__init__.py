# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    OwnerBlogQueryDep,
    PublicBlogQueryDep,
    SessionDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_blog_service,
    get_current_user,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "OwnerBlogQueryDep",
    "PublicBlogQueryDep",
    "SessionDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_service",
    "get_current_user",
    "oauth2_scheme",
]
