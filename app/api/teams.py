"""팀 라우터 — 팀 조회/생성 엔드포인트.

Team Router — endpoints for reading and creating teams.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.team import TeamCreate, TeamResponse
from app.services.team_service import team_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[TeamResponse])
async def list_teams(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TeamResponse]:
    """팀 목록을 이름순으로 조회합니다 — List teams ordered by name."""
    return await team_service.list_teams(db)


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamResponse:
    """팀 한 개를 조회합니다 — Retrieve one team with its member count."""
    return await team_service.get_team(db, team_id)


@router.post("/", response_model=TeamResponse, status_code=201)
async def create_team(
    data: TeamCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamResponse:
    """새 팀을 생성합니다. 생성자는 X-Auditor 헤더에서 가져옵니다.

    Create a team; ``created_by`` comes from the ``X-Auditor`` header.
    """
    result: TeamResponse = await team_service.create_team(db, data)
    await db.commit()
    return result
