"""Tests for the /api/blogs endpoints."""

from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient

BLOGS = "/api/blogs"
MINE = "/api/blogs/user/me"
MISSING_ID = "00000000-0000-0000-0000-000000000000"

type Register = Callable[..., Awaitable[dict[str, str]]]


async def create(client: AsyncClient, headers: dict[str, str], **fields: object) -> dict:
    body = {"title": "Hello world", "body": "some words here"}
    body.update(fields)
    response = await client.post(BLOGS, json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["blog"]


async def publish(client: AsyncClient, headers: dict[str, str], blog_id: str) -> dict:
    response = await client.patch(
        f"{BLOGS}/{blog_id}",
        json={"state": "published"},
        headers=headers,
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]["blog"]


@pytest.fixture
async def intruder_headers(register: Register) -> dict[str, str]:
    return await register(email="eve@example.com")


class TestCreateBlog:
    """POST /api/blogs."""

    async def test_created_as_draft(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            BLOGS,
            json={
                "title": "First",
                "description": "desc",
                "body": " ".join(["w"] * 201),
                "tags": ["python", "web"],
                "state": "published",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Blog created successfully"
        blog = body["data"]["blog"]
        assert blog["state"] == "draft"
        assert blog["readCount"] == 0
        assert blog["readingTime"] == 2
        assert blog["tags"] == ["python", "web"]
        assert blog["author"]["email"] == "ada@example.com"
        assert "passwordHash" not in blog["author"]
        assert {"timestamp", "updatedAt"} <= set(blog)

    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post(BLOGS, json={"title": "T", "body": "b"})

        assert response.status_code == 401
        assert response.json()["message"] == "Access denied. No token provided."

    async def test_duplicate_title(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await create(client, auth_headers, title="Same")

        response = await client.post(
            BLOGS,
            json={"title": "Same", "body": "other"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "title already exists"}

    async def test_missing_body(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        response = await client.post(BLOGS, json={"title": "T"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "body: Field required"


class TestListPublished:
    """GET /api/blogs."""

    async def test_pagination(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        for i in range(12):
            blog = await create(client, auth_headers, title=f"Blog {i:02}")
            await publish(client, auth_headers, blog["id"])

        first = (await client.get(BLOGS, params={"limit": 5})).json()["data"]
        last = (await client.get(BLOGS, params={"limit": 5, "page": 3})).json()["data"]
        beyond = (await client.get(BLOGS, params={"limit": 5, "page": 4})).json()["data"]

        assert len(first["blogs"]) == 5
        assert first["pagination"] == {
            "currentPage": 1,
            "totalPages": 3,
            "totalBlogs": 12,
            "limit": 5,
        }
        assert len(last["blogs"]) == 2
        assert beyond["blogs"] == []
        assert beyond["pagination"]["totalBlogs"] == 12

    async def test_drafts_hidden(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        await create(client, auth_headers, title="Draft only")

        response = await client.get(BLOGS)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["blogs"] == []
        assert data["pagination"]["totalPages"] == 0

    async def test_public_without_token(self, client: AsyncClient) -> None:
        assert (await client.get(BLOGS)).status_code == 200

    async def test_search_title_and_tag(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        by_title = await create(client, auth_headers, title="Intro to Python")
        by_tag = await create(client, auth_headers, title="Other", tags=["PyThon"])
        neither = await create(client, auth_headers, title="Rust", tags=["systems"])
        for blog in (by_title, by_tag, neither):
            await publish(client, auth_headers, blog["id"])

        response = await client.get(BLOGS, params={"search": "python"})

        titles = {blog["title"] for blog in response.json()["data"]["blogs"]}
        assert titles == {"Intro to Python", "Other"}

    async def test_search_is_literal(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        percent = await create(client, auth_headers, title="50% off")
        plain = await create(client, auth_headers, title="Plain")
        for blog in (percent, plain):
            await publish(client, auth_headers, blog["id"])

        percent_hits = (await client.get(BLOGS, params={"search": "%"})).json()["data"]
        underscore_hits = (await client.get(BLOGS, params={"search": "_"})).json()["data"]

        assert [blog["title"] for blog in percent_hits["blogs"]] == ["50% off"]
        assert underscore_hits["blogs"] == []

    async def test_search_keeps_surrounding_spaces(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        joined = await create(client, auth_headers, title="mypost")
        spaced = await create(client, auth_headers, title="my post")
        for blog in (joined, spaced):
            await publish(client, auth_headers, blog["id"])

        leading = (await client.get(BLOGS, params={"search": " post"})).json()["data"]
        blank = (await client.get(BLOGS, params={"search": " "})).json()["data"]

        assert [blog["title"] for blog in leading["blogs"]] == ["my post"]
        assert [blog["title"] for blog in blank["blogs"]] == ["my post"]
        assert blank["pagination"]["totalBlogs"] == 1

    async def test_search_folds_accented_case(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = await create(client, auth_headers, title="Éclair recipes")
        await publish(client, auth_headers, blog["id"])

        response = await client.get(BLOGS, params={"search": "éclair"})

        assert [blog["title"] for blog in response.json()["data"]["blogs"]] == ["Éclair recipes"]

    async def test_order_by_read_count(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        popular = await create(client, auth_headers, title="Popular")
        quiet = await create(client, auth_headers, title="Quiet")
        for blog in (popular, quiet):
            await publish(client, auth_headers, blog["id"])
        for _ in range(3):
            await client.get(f"{BLOGS}/{popular['id']}")
        await client.get(f"{BLOGS}/{quiet['id']}")

        desc = (await client.get(BLOGS, params={"orderBy": "read_count"})).json()["data"]
        asc_params = {"orderBy": "read_count", "order": "asc"}
        asc = (await client.get(BLOGS, params=asc_params)).json()["data"]

        assert [blog["title"] for blog in desc["blogs"]] == ["Popular", "Quiet"]
        assert [blog["readCount"] for blog in asc["blogs"]] == [1, 3]

    async def test_bad_params_fall_back(self, client: AsyncClient) -> None:
        response = await client.get(
            BLOGS,
            params={"page": "zero", "limit": "-3", "orderBy": "title", "order": "up"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["pagination"]["currentPage"] == 1
        assert response.json()["data"]["pagination"]["limit"] == 20


class TestGetPublished:
    """GET /api/blogs/{blog_id}."""

    async def test_increments_read_count(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = await publish(client, auth_headers, (await create(client, auth_headers))["id"])

        first = await client.get(f"{BLOGS}/{blog['id']}")
        second = await client.get(f"{BLOGS}/{blog['id']}")

        assert first.status_code == 200
        assert first.json()["data"]["blog"]["readCount"] == 1
        assert second.json()["data"]["blog"]["readCount"] == 2
        assert first.json()["data"]["blog"]["author"]["firstName"] == "Ada"

    async def test_draft_is_not_found(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = await create(client, auth_headers)

        response = await client.get(f"{BLOGS}/{blog['id']}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Blog not found"}

    async def test_missing(self, client: AsyncClient) -> None:
        response = await client.get(f"{BLOGS}/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json()["message"] == "Blog not found"

    async def test_invalid_id(self, client: AsyncClient) -> None:
        response = await client.get(f"{BLOGS}/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid ID format"}


class TestListOwn:
    """GET /api/blogs/user/me."""

    async def test_newest_first_with_drafts(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        intruder_headers: dict[str, str],
    ) -> None:
        first = await create(client, auth_headers, title="First")
        await create(client, auth_headers, title="Second")
        await create(client, intruder_headers, title="Not mine")
        await publish(client, auth_headers, first["id"])

        response = await client.get(MINE, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [blog["title"] for blog in data["blogs"]] == ["Second", "First"]
        assert data["pagination"]["totalBlogs"] == 2

    async def test_state_filter(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        first = await create(client, auth_headers, title="First")
        await create(client, auth_headers, title="Second")
        await publish(client, auth_headers, first["id"])

        drafts = (await client.get(MINE, params={"state": "draft"}, headers=auth_headers)).json()
        bogus = await client.get(MINE, params={"state": "bogus"}, headers=auth_headers)
        everything = bogus.json()

        assert [blog["title"] for blog in drafts["data"]["blogs"]] == ["Second"]
        assert everything["data"]["pagination"]["totalBlogs"] == 2

    async def test_requires_token(self, client: AsyncClient) -> None:
        assert (await client.get(MINE)).status_code == 401


class TestUpdateBlog:
    """PATCH /api/blogs/{blog_id}."""

    async def test_owner_updates(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create(client, auth_headers, description="old")

        response = await client.patch(
            f"{BLOGS}/{blog['id']}",
            json={"title": "New title", "description": None, "tags": ["x"]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Blog updated successfully"
        updated = body["data"]["blog"]
        assert updated["title"] == "New title"
        assert updated["description"] is None
        assert updated["tags"] == ["x"]
        assert updated["body"] == blog["body"]

    async def test_not_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        intruder_headers: dict[str, str],
    ) -> None:
        blog = await create(client, auth_headers)

        response = await client.patch(
            f"{BLOGS}/{blog['id']}",
            json={"title": "Hijacked"},
            headers=intruder_headers,
        )

        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "You are not authorized to update this blog",
        }

    async def test_missing(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        response = await client.patch(
            f"{BLOGS}/{MISSING_ID}",
            json={"title": "x"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.patch(f"{BLOGS}/{MISSING_ID}", json={"title": "x"})

        assert response.status_code == 401


class TestDeleteBlog:
    """DELETE /api/blogs/{blog_id}."""

    async def test_owner_deletes(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create(client, auth_headers)

        response = await client.delete(f"{BLOGS}/{blog['id']}", headers=auth_headers)
        again = await client.delete(f"{BLOGS}/{blog['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Blog deleted successfully"}
        assert again.status_code == 404

    async def test_not_owner(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        intruder_headers: dict[str, str],
    ) -> None:
        blog = await create(client, auth_headers)

        response = await client.delete(f"{BLOGS}/{blog['id']}", headers=intruder_headers)
        mine = await client.get(MINE, headers=auth_headers)

        assert response.status_code == 403
        assert response.json()["message"] == "You are not authorized to delete this blog"
        assert mine.json()["data"]["pagination"]["totalBlogs"] == 1

    async def test_missing(self, client: AsyncClient, intruder_headers: dict[str, str]) -> None:
        response = await client.delete(f"{BLOGS}/{MISSING_ID}", headers=intruder_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Blog not found"}
