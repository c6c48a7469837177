"""
Unit tests for the team API endpoints.

Covers creation, lookup, the per-team average age and deleting teams that
are still referenced by members.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestCreateTeam:
    async def test_create_team(self, client: AsyncClient):
        response = await client.post("/api/v1/teams", json={"name": "teamA"})
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "teamA"
        assert "id" in data

    async def test_create_team_empty_name(self, client: AsyncClient):
        response = await client.post("/api/v1/teams", json={"name": ""})
        assert response.status_code == 422


class TestReadTeams:
    async def test_list_teams(self, client: AsyncClient, seeded_api):
        response = await client.get("/api/v1/teams")
        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["teamA", "teamB"]

    async def test_list_teams_paged(self, client: AsyncClient, seeded_api):
        response = await client.get("/api/v1/teams", params={"offset": 1, "limit": 1})
        assert [t["name"] for t in response.json()] == ["teamB"]

    async def test_get_team(self, client: AsyncClient, seeded_api):
        team_id = seeded_api["teams"]["teamB"]
        response = await client.get(f"/api/v1/teams/{team_id}")
        assert response.status_code == 200
        assert response.json() == {"id": team_id, "name": "teamB"}

    async def test_get_team_not_found(self, client: AsyncClient):
        response = await client.get("/api/v1/teams/999")
        assert response.status_code == 404

    async def test_team_members(self, client: AsyncClient, seeded_api):
        team_id = seeded_api["teams"]["teamA"]
        response = await client.get(f"/api/v1/teams/{team_id}/members")
        assert response.status_code == 200
        assert [(m["username"], m["age"]) for m in response.json()] == [("member1", 10), ("member2", 20)]

    async def test_team_members_unknown_team(self, client: AsyncClient):
        response = await client.get("/api/v1/teams/999/members")
        assert response.status_code == 404


class TestAverageAge:
    async def test_average_age_by_team(self, client: AsyncClient, seeded_api):
        response = await client.get("/api/v1/teams/stats/average-age")
        assert response.status_code == 200
        assert response.json() == [
            {"team_name": "teamA", "average_age": 15.0},
            {"team_name": "teamB", "average_age": 20.0},
        ]

    async def test_average_age_without_members(self, client: AsyncClient):
        await client.post("/api/v1/teams", json={"name": "teamC"})

        response = await client.get("/api/v1/teams/stats/average-age")
        assert response.json() == []


class TestDeleteTeam:
    async def test_delete_empty_team(self, client: AsyncClient):
        team_id = (await client.post("/api/v1/teams", json={"name": "teamC"})).json()["id"]

        response = await client.delete(f"/api/v1/teams/{team_id}")
        assert response.status_code == 204
        assert (await client.get(f"/api/v1/teams/{team_id}")).status_code == 404

    async def test_delete_team_with_members_conflicts(self, client: AsyncClient, seeded_api):
        response = await client.delete(f"/api/v1/teams/{seeded_api['teams']['teamA']}")
        assert response.status_code == 409
        assert response.json()["error_type"] == "IntegrityError"

    async def test_delete_missing_team(self, client: AsyncClient):
        response = await client.delete("/api/v1/teams/999")
        assert response.status_code == 404
