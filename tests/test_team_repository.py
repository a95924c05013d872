"""팀 레포지토리 테스트.

Team repository tests — session-level CRUD, generic repository operations,
sort validation and the member/team association.
"""

import warnings

import pytest
from sqlalchemy.exc import NoResultFound, SAWarning
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository as repo
from app.repositories.team_session_repository import team_session_repository as session_repo
from app.utils.exceptions import BadRequestError
from app.utils.pagination import Direction, PageRequest, Sort


class TestTeamSessionRepository:
    """세션 직접 사용 팀 레포지토리 테스트."""

    async def test_basic_crud(self, db: AsyncSession):
        team1 = await session_repo.save(db, Team("team1"))
        team2 = await session_repo.save(db, Team("team2"))

        assert await session_repo.find_by_id(db, team1.id) is team1
        assert await session_repo.find(db, team2.id) is team2
        assert len(await session_repo.find_all(db)) == 2
        assert await session_repo.count(db) == 2

        await session_repo.delete(db, team1)
        await session_repo.delete(db, team2)
        assert await session_repo.count(db) == 0

    async def test_find_missing_raises(self, db: AsyncSession):
        with pytest.raises(NoResultFound):
            await session_repo.find(db, 12345)


class TestTeamRepository:
    """제네릭 레포지토리 기반 팀 레포지토리 테스트."""

    async def test_find_by_name(self, db: AsyncSession):
        team_a, _ = await repo.save_all(db, [Team("teamA"), Team("teamB")])

        assert await repo.find_by_name(db, "teamA") == [team_a]
        assert await repo.find_by_name(db, "teamC") == []

    async def test_count_members(self, db: AsyncSession):
        """저장된 팀에 연결한 회원 여러 명을 한 번에 저장 — 경고 없이 모두 저장됨."""
        team_a, team_b = await repo.save_all(db, [Team("teamA"), Team("teamB")])
        with warnings.catch_warnings():
            warnings.simplefilter("error", SAWarning)
            await member_repository.save_all(
                db,
                [Member("m1", 10, team_a), Member("m2", 20, team_a), Member("m3", 30, team_b)],
            )

        assert await repo.count_members(db, team_a.id) == 2
        assert await repo.count_members(db, team_b.id) == 1

    async def test_find_all_sorted(self, db: AsyncSession):
        await repo.save_all(db, [Team("b"), Team("c"), Team("a")])

        teams = await repo.find_all(db, Sort.by(Direction.DESC, "name"))
        assert [t.name for t in teams] == ["c", "b", "a"]

    async def test_find_all_unknown_sort_property(self, db: AsyncSession):
        """매핑되지 않은 속성으로 정렬하면 400."""
        with pytest.raises(BadRequestError) as exc_info:
            await repo.find_all(db, Sort.by(Direction.ASC, "nickname"))
        assert exc_info.value.status_code == 400
        assert "nickname" in exc_info.value.detail

    async def test_find_page(self, db: AsyncSession):
        await repo.save_all(db, [Team(f"team{i}") for i in range(5)])

        page = await repo.find_page(db, PageRequest.of(1, 2, Sort.by(Direction.ASC, "name")))
        assert [t.name for t in page.items] == ["team2", "team3"]
        assert page.total == 5
        assert page.pages == 3
        assert page.has_next is True

    async def test_delete_by_id(self, db: AsyncSession):
        team = await repo.save(db, Team("teamA"))

        assert await repo.exists_by_id(db, team.id) is True
        assert await repo.delete_by_id(db, team.id) is True
        assert await repo.exists_by_id(db, team.id) is False
        assert await repo.delete_by_id(db, team.id) is False


class TestTeamMemberAssociation:
    """회원-팀 연관관계 테스트."""

    async def test_member_joins_team(self):
        """회원 생성 시 팀을 주면 양쪽이 모두 연결됨."""
        team = Team("teamA")
        member = Member("member1", 10, team)

        assert member.team is team
        assert member in team.members

    async def test_change_team_moves_member(self):
        """팀 변경 시 이전 팀 컬렉션에서 빠지고 새 팀에 추가됨."""
        team_a, team_b = Team("teamA"), Team("teamB")
        member = Member("member1", 10, team_a)

        member.change_team(team_b)

        assert member.team is team_b
        assert member in team_b.members
        assert member not in team_a.members

    async def test_change_team_persists(self, db: AsyncSession):
        team_a, team_b = await repo.save_all(db, [Team("teamA"), Team("teamB")])
        member = await member_repository.save(db, Member("member1", 10, team_a))

        member.change_team(team_b)
        await db.flush()

        assert member.team_id == team_b.id
        assert await repo.count_members(db, team_a.id) == 0
        assert await repo.count_members(db, team_b.id) == 1

    async def test_member_without_team(self, db: AsyncSession):
        member = await member_repository.save(db, Member("member1"))

        assert member.team is None
        assert member.team_id is None
        assert member.age == 0
