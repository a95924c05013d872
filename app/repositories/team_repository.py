"""팀 레포지토리 — 팀 CRUD 쿼리.

Team Repository — generic CRUD plus lookup by name.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.team import Team
from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Team)

    async def find_by_name(self, db: AsyncSession, name: str) -> list[Team]:
        result = await db.execute(select(Team).where(Team.name == name))
        return list(result.scalars().all())

    async def count_members(self, db: AsyncSession, team_id: int) -> int:
        """팀에 소속된 회원 수 — Number of members whose team is ``team_id``."""
        query: Select = select(func.count()).select_from(Member).where(Member.team_id == team_id)
        return (await db.execute(query)).scalar_one()


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
