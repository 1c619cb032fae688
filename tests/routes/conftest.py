"""Fixtures for route tests: registered users and their auth headers."""

from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient

type Register = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
def register(client: AsyncClient) -> Register:
    """Sign a user up through the API and return its bearer header."""

    async def factory(email: str = "ada@example.com", password: str = "secret1") -> dict[str, str]:
        response = await client.post(
            "/api/auth/signup",
            json={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": email,
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        token = response.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return factory


@pytest.fixture
async def auth_headers(register: Register) -> dict[str, str]:
    return await register()
