# app/dependencies/dependencies.py

"""Application dependencies: sessions, services, authentication and listing queries."""

from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.errors.auth import MissingTokenError
from app.models import UserDB
from app.repositories import (
    BlogQuery,
    BlogRepository,
    UserRepository,
    build_owner_query,
    build_public_query,
)
from app.services import AuthService, BlogService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    return AuthService(repo)


def get_blog_service(repo: BlogRepoDep) -> BlogService:
    return BlogService(repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    auth_service: AuthServiceDep,
) -> UserDB:
    """
    Get the user identified by the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, or None when the header is missing.
    auth_service : AuthService
        Service resolving tokens to users.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    MissingTokenError
        If no bearer token was sent.
    TokenExpiredError, InvalidTokenError, UserNotFoundError
        If the token cannot be resolved to a user.
    """
    if not token:
        raise MissingTokenError
    return await auth_service.authenticate(token)


UserDBDep = Annotated[UserDB, Depends(get_current_user)]


def get_public_blog_query(
    page: Annotated[str | None, Query(description="Page number, from 1")] = None,
    limit: Annotated[str | None, Query(description="Page size (max 100)")] = None,
    search: Annotated[str | None, Query(description="Matches title or tags")] = None,
    order_by: Annotated[
        str | None,
        Query(alias="orderBy", description="read_count, reading_time or timestamp"),
    ] = None,
    order: Annotated[str | None, Query(description="asc or desc")] = None,
) -> BlogQuery:
    """
    Dependency to construct the public listing query from query parameters.

    Values are taken as raw strings; invalid ones fall back to defaults.

    Returns
    -------
    BlogQuery
        Normalized published-only query.
    """
    return build_public_query(page, limit, search, order_by, order)


def get_owner_blog_query(
    user: UserDBDep,
    page: Annotated[str | None, Query(description="Page number, from 1")] = None,
    limit: Annotated[str | None, Query(description="Page size (max 100)")] = None,
    state: Annotated[str | None, Query(description="draft or published")] = None,
) -> BlogQuery:
    """
    Dependency to construct the caller's own listing query.

    Returns
    -------
    BlogQuery
        Newest-first query over the caller's blogs.
    """
    return build_owner_query(user.id, page, limit, state)


PublicBlogQueryDep = Annotated[BlogQuery, Depends(get_public_blog_query)]
OwnerBlogQueryDep = Annotated[BlogQuery, Depends(get_owner_blog_query)]
