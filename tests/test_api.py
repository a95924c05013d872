"""회원/팀 API 테스트.

Member and team API tests — creation with the X-Auditor header, lookups,
paged listing with sort parameters and error responses.
"""

from httpx import AsyncClient

from tests.conftest import auditor_header

MEMBERS_URL = "/api/v1/members/"
TEAMS_URL = "/api/v1/teams/"


async def _create_team(client: AsyncClient, name: str, auditor: str = "admin") -> dict:
    res = await client.post(TEAMS_URL, json={"name": name}, headers=auditor_header(auditor))
    assert res.status_code == 201
    return res.json()


async def _create_member(client: AsyncClient, username: str, age: int, team_id: int | None = None) -> dict:
    res = await client.post(MEMBERS_URL, json={"username": username, "age": age, "team_id": team_id})
    assert res.status_code == 201
    return res.json()


class TestHealth:
    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}


class TestTeamApi:
    """팀 API 테스트."""

    async def test_create_team_records_auditor(self, client: AsyncClient):
        """X-Auditor 헤더의 작성자가 created_by에 기록됨."""
        data = await _create_team(client, "teamA", auditor="alice")

        assert data["name"] == "teamA"
        assert data["created_by"] == "alice"
        assert data["member_count"] == 0
        assert data["created_date"] is not None

    async def test_create_team_without_auditor(self, client: AsyncClient):
        """헤더가 없으면 기본 작성자."""
        res = await client.post(TEAMS_URL, json={"name": "teamA"})
        assert res.status_code == 201
        assert res.json()["created_by"] == "system"

    async def test_create_team_empty_name(self, client: AsyncClient):
        res = await client.post(TEAMS_URL, json={"name": ""})
        assert res.status_code == 422

    async def test_list_teams_by_name(self, client: AsyncClient):
        await _create_team(client, "teamB")
        await _create_team(client, "teamA")

        res = await client.get(TEAMS_URL)
        assert res.status_code == 200
        assert [t["name"] for t in res.json()] == ["teamA", "teamB"]

    async def test_get_team_with_member_count(self, client: AsyncClient):
        team = await _create_team(client, "teamA")
        await _create_member(client, "member1", 10, team["id"])
        await _create_member(client, "member2", 20, team["id"])

        res = await client.get(f"{TEAMS_URL}{team['id']}")
        assert res.status_code == 200
        assert res.json()["member_count"] == 2

    async def test_get_nonexistent_team(self, client: AsyncClient):
        res = await client.get(f"{TEAMS_URL}9999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Team not found"


class TestMemberApi:
    """회원 API 테스트."""

    async def test_create_member_in_team(self, client: AsyncClient):
        team = await _create_team(client, "teamA")

        data = await _create_member(client, "member1", 10, team["id"])

        assert data["username"] == "member1"
        assert data["team_name"] == "teamA"
        assert data["id"] is not None

    async def test_create_member_without_team(self, client: AsyncClient):
        data = await _create_member(client, "member1", 10)
        assert data["team_name"] is None

    async def test_create_member_unknown_team(self, client: AsyncClient):
        res = await client.post(MEMBERS_URL, json={"username": "member1", "age": 10, "team_id": 9999})
        assert res.status_code == 404
        assert res.json()["detail"] == "Team not found"

    async def test_create_member_negative_age(self, client: AsyncClient):
        res = await client.post(MEMBERS_URL, json={"username": "member1", "age": -1})
        assert res.status_code == 422

    async def test_get_member(self, client: AsyncClient):
        team = await _create_team(client, "teamA")
        created = await _create_member(client, "member1", 10, team["id"])

        res = await client.get(f"{MEMBERS_URL}{created['id']}")
        assert res.status_code == 200
        assert res.json() == {"id": created["id"], "username": "member1", "team_name": "teamA"}

    async def test_get_nonexistent_member(self, client: AsyncClient):
        res = await client.get(f"{MEMBERS_URL}9999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Member not found"


class TestMemberPagingApi:
    """회원 목록 페이징 API 테스트."""

    async def _create_five(self, client: AsyncClient) -> None:
        team = await _create_team(client, "teamA")
        for i in range(1, 6):
            await _create_member(client, f"member{i}", 10 * i, team["id"])

    async def test_first_page(self, client: AsyncClient):
        await self._create_five(client)

        res = await client.get(MEMBERS_URL, params={"page": 0, "size": 3, "sort": "username,desc"})
        assert res.status_code == 200
        data = res.json()
        assert [m["username"] for m in data["items"]] == ["member5", "member4", "member3"]
        assert all(m["team_name"] == "teamA" for m in data["items"])
        assert data["total"] == 5
        assert data["page"] == 0
        assert data["per_page"] == 3
        assert data["pages"] == 2
        assert data["is_first"] is True
        assert data["has_previous"] is False
        assert data["has_next"] is True

    async def test_multiple_sort_params(self, client: AsyncClient):
        await self._create_five(client)

        res = await client.get(MEMBERS_URL, params=[("sort", "age,desc"), ("sort", "username")])
        assert res.status_code == 200
        assert [m["username"] for m in res.json()["items"]] == [
            "member5", "member4", "member3", "member2", "member1",
        ]

    async def test_last_page(self, client: AsyncClient):
        await self._create_five(client)

        res = await client.get(MEMBERS_URL, params={"page": 1, "size": 3, "sort": "username"})
        data = res.json()
        assert [m["username"] for m in data["items"]] == ["member4", "member5"]
        assert data["is_last"] is True
        assert data["has_next"] is False
        assert data["has_previous"] is True

    async def test_default_page_size(self, client: AsyncClient):
        await self._create_five(client)

        data = (await client.get(MEMBERS_URL)).json()
        assert data["per_page"] == 20
        assert len(data["items"]) == 5

    async def test_unknown_sort_property(self, client: AsyncClient):
        res = await client.get(MEMBERS_URL, params={"sort": "nickname"})
        assert res.status_code == 400
        assert res.json()["detail"] == "No property 'nickname' found for type 'Member'"

    async def test_invalid_sort_direction(self, client: AsyncClient):
        res = await client.get(MEMBERS_URL, params={"sort": "username,up"})
        assert res.status_code == 400

    async def test_invalid_page_params(self, client: AsyncClient):
        assert (await client.get(MEMBERS_URL, params={"page": -1})).status_code == 422
        assert (await client.get(MEMBERS_URL, params={"size": 0})).status_code == 422
