"""팀 순수 세션 레포지토리.

Team session repository — hand-written queries against the AsyncSession.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.team import Team


class TeamSessionRepository:
    """팀 테이블에 대한 수작업 쿼리 레포지토리.

    Hand-written repository over the teams table.
    """

    async def save(self, db: AsyncSession, team: Team) -> Team:
        db.add(team)
        await db.flush()
        return team

    async def delete(self, db: AsyncSession, team: Team) -> None:
        await db.delete(team)
        await db.flush()

    async def count(self, db: AsyncSession) -> int:
        query: Select = select(func.count()).select_from(Team)
        return (await db.execute(query)).scalar_one()

    async def find_by_id(self, db: AsyncSession, team_id: int) -> Team | None:
        return await db.get(Team, team_id)

    async def find(self, db: AsyncSession, team_id: int) -> Team:
        return await db.get_one(Team, team_id)

    async def find_all(self, db: AsyncSession) -> list[Team]:
        result = await db.execute(select(Team))
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
team_session_repository: TeamSessionRepository = TeamSessionRepository()
