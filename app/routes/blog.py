# app/routes/blog.py

"""
Blog Routes.

Provides the public listing and single-blog read, plus the author-only
create, update, delete and own-listing endpoints.

Summary
-------
Endpoints include:
  - List published blogs (search, ordering, pagination)
  - Create blog (always a draft)
  - List the caller's own blogs
  - Get a published blog by id (counts the read)
  - Update blog
  - Delete blog

Rate Limiting
-------------
Write endpoints are limited per API key or client IP and include `429`
response examples.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from app.dependencies import BlogServiceDep, OwnerBlogQueryDep, PublicBlogQueryDep, UserDBDep
from app.managers import BLOG_WRITE_LIMIT, limiter
from app.schemas import ApiResponse, BlogCreate, BlogData, BlogPage, BlogUpdate, MessageResponse

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "Notes on the Analytical Engine",
    "description": "A short tour",
    "body": "The engine weaves algebraic patterns...",
    "author": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
    },
    "state": "draft",
    "readCount": 0,
    "readingTime": 1,
    "tags": ["history", "computing"],
    "timestamp": "2025-01-01T10:00:00Z",
    "updatedAt": "2025-01-01T10:00:00Z",
}
PAGE_EXAMPLE = {
    "success": True,
    "data": {
        "blogs": [BLOG_EXAMPLE],
        "pagination": {"currentPage": 1, "totalPages": 1, "totalBlogs": 1, "limit": 20},
    },
}


def _error(description: str, message: str) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"example": {"success": False, "message": message}}},
    }


UNAUTHORIZED = _error("Unauthorized", "Access denied. No token provided.")
NOT_FOUND = _error("Not found", "Blog not found")
RATE_LIMITED = _error("Rate limit exceeded", "Rate limit exceeded: 10 per 1 minute")


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogPage],
    summary="List published blogs",
    description=(
        "Published blogs with case-insensitive search over title and tags, "
        "ordering by `read_count`, `reading_time` or `timestamp`, and pagination."
    ),
    responses={200: {"content": {"application/json": {"example": PAGE_EXAMPLE}}}},
    operation_id="blogs_list_published",
)
async def list_published_blogs(
    query: PublicBlogQueryDep,
    service: BlogServiceDep,
) -> ApiResponse[BlogPage]:
    """
    List published blogs.

    Parameters
    ----------
    query : BlogQuery
        Normalized `page`, `limit`, `search`, `orderBy` and `order`.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ApiResponse[BlogPage]
        One page of blogs and its pagination metadata.
    """
    return ApiResponse(data=await service.list_published_blogs(query))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogData],
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a blog owned by the caller. New blogs always start as drafts.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "Blog created successfully",
                        "data": {"blog": BLOG_EXAMPLE},
                    },
                },
            },
        },
        400: _error("Bad request", "title already exists"),
        401: UNAUTHORIZED,
        429: RATE_LIMITED,
    },
    operation_id="blogs_create",
)
@limiter.limit(BLOG_WRITE_LIMIT)
async def create_blog(
    request: Request,
    response: Response,
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "Notes on the Analytical Engine",
                    "description": "A short tour",
                    "body": "The engine weaves algebraic patterns...",
                    "tags": ["history", "computing"],
                },
            ],
        ),
    ],
    user: UserDBDep,
    service: BlogServiceDep,
) -> ApiResponse[BlogData]:
    """
    Create a new blog post.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    blog : BlogCreate
        Title, body, and optional description and tags.
    user : UserDB
        Authenticated author.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ApiResponse[BlogData]
        The created draft.

    Raises
    ------
    DuplicateEntryError
        If the title is already used.
    """
    created = await service.create_blog(user, blog)
    return ApiResponse(message="Blog created successfully", data=BlogData(blog=created))


@router.get(
    "/user/me",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogPage],
    summary="List my blogs",
    description="The caller's blogs, newest first, optionally filtered by `state`.",
    responses={
        200: {"content": {"application/json": {"example": PAGE_EXAMPLE}}},
        401: UNAUTHORIZED,
    },
    operation_id="blogs_list_own",
)
async def list_own_blogs(
    query: OwnerBlogQueryDep,
    user: UserDBDep,
    service: BlogServiceDep,
) -> ApiResponse[BlogPage]:
    """
    List the caller's blogs.

    Parameters
    ----------
    query : BlogQuery
        Normalized `page`, `limit` and `state`, scoped to the caller.
    user : UserDB
        Authenticated author.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ApiResponse[BlogPage]
        One page of the caller's blogs.
    """
    return ApiResponse(data=await service.list_own_blogs(user, query))


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogData],
    summary="Get a published blog",
    description="Return a published blog and increment its read count. Drafts are not found.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "data": {"blog": BLOG_EXAMPLE}},
                },
            },
        },
        404: NOT_FOUND,
    },
    operation_id="blogs_get_published",
)
async def get_published_blog(blog_id: UUID, service: BlogServiceDep) -> ApiResponse[BlogData]:
    """
    Retrieve a published blog by id.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ApiResponse[BlogData]
        The blog, with its read count already incremented.

    Raises
    ------
    BlogNotFoundError
        If no published blog has this id.
    """
    blog = await service.get_published_blog(blog_id)
    return ApiResponse(data=BlogData(blog=blog))


@router.patch(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[BlogData],
    summary="Update a blog",
    description="Partially update one of the caller's blogs, including its state.",
    responses={
        401: UNAUTHORIZED,
        403: _error("Forbidden", "You are not authorized to update this blog"),
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_update",
)
@limiter.limit(BLOG_WRITE_LIMIT)
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    changes: Annotated[BlogUpdate, Body(examples=[{"state": "published"}])],
    user: UserDBDep,
    service: BlogServiceDep,
) -> ApiResponse[BlogData]:
    """
    Update a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    blog_id : UUID
        Blog identifier.
    changes : BlogUpdate
        Fields to change; absent fields are left alone.
    user : UserDB
        Authenticated caller.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ApiResponse[BlogData]
        The updated blog.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    ForbiddenError
        If the caller is not the author.
    """
    updated = await service.update_blog(user, blog_id, changes)
    return ApiResponse(message="Blog updated successfully", data=BlogData(blog=updated))


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete a blog",
    description="Delete one of the caller's blogs.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "message": "Blog deleted successfully"},
                },
            },
        },
        401: UNAUTHORIZED,
        403: _error("Forbidden", "You are not authorized to delete this blog"),
        404: NOT_FOUND,
        429: RATE_LIMITED,
    },
    operation_id="blogs_delete",
)
@limiter.limit(BLOG_WRITE_LIMIT)
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    user: UserDBDep,
    service: BlogServiceDep,
) -> MessageResponse:
    """
    Delete a blog.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    blog_id : UUID
        Blog identifier.
    user : UserDB
        Authenticated caller.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    MessageResponse
        Confirmation message.

    Raises
    ------
    BlogNotFoundError
        If the blog does not exist.
    ForbiddenError
        If the caller is not the author.
    """
    await service.delete_blog(user, blog_id)
    return MessageResponse(message="Blog deleted successfully")
