"""팀 서비스 — 팀 CRUD 비즈니스 로직.

Team Service — Business logic for team creation and retrieval.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.team import Team
from app.repositories.team_repository import team_repository
from app.schemas.team import TeamCreate, TeamResponse
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Direction, Sort


class TeamService:
    """팀 관련 비즈니스 로직을 처리하는 서비스."""

    async def _to_response(self, db: AsyncSession, team: Team) -> TeamResponse:
        """팀 모델을 응답 스키마로 변환합니다 (회원 수 포함).

        Convert a Team model instance to a TeamResponse with its member count.
        """
        return TeamResponse(
            id=team.id,
            name=team.name,
            member_count=await team_repository.count_members(db, team.id),
            created_by=team.created_by,
            created_date=team.created_date,
        )

    async def list_teams(self, db: AsyncSession) -> list[TeamResponse]:
        teams: list[Team] = await team_repository.find_all(db, Sort.by(Direction.ASC, "name"))
        return [await self._to_response(db, t) for t in teams]

    async def get_team(self, db: AsyncSession, team_id: int) -> TeamResponse:
        """팀 한 개를 조회합니다.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        team: Team | None = await team_repository.find_by_id(db, team_id)
        if team is None:
            raise NotFoundError("Team not found")
        return await self._to_response(db, team)

    async def create_team(self, db: AsyncSession, data: TeamCreate) -> TeamResponse:
        team: Team = await team_repository.save(db, Team(name=data.name))
        return await self._to_response(db, team)


# 싱글턴 인스턴스 — Singleton instance
team_service: TeamService = TeamService()
