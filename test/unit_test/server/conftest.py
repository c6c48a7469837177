from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client whose requests all share the test session.

    ``ASGITransport`` does not send lifespan events, so the application's own
    schema creation never runs; the ``session`` fixture's engine already has
    every table.
    """
    from querylab.core.database import get_session
    from querylab.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_api(client: AsyncClient) -> dict:
    """teamA with member1 (10) and member2 (20); teamB with member3 and member4 (20), created over HTTP."""
    team_ids = {}
    for name in ("teamA", "teamB"):
        response = await client.post("/api/v1/teams", json={"name": name})
        team_ids[name] = response.json()["id"]

    member_ids = {}
    for username, age, team in (
        ("member1", 10, "teamA"),
        ("member2", 20, "teamA"),
        ("member3", 20, "teamB"),
        ("member4", 20, "teamB"),
    ):
        response = await client.post(
            "/api/v1/members", json={"username": username, "age": age, "team_id": team_ids[team]}
        )
        member_ids[username] = response.json()["id"]

    return {"teams": team_ids, "members": member_ids}
