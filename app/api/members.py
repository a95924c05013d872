"""회원 라우터 — 회원 조회/생성 엔드포인트.

Member Router — endpoints for reading and creating members.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_page_request
from app.database import get_db
from app.schemas.member import MemberCreate, MemberDto, MemberPage
from app.services.member_service import member_service
from app.utils.pagination import PageRequest

router: APIRouter = APIRouter()


@router.get("/", response_model=MemberPage)
async def list_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> MemberPage:
    """회원 목록을 페이지 단위로 조회합니다.

    List members page by page (``?page=0&size=20&sort=username,desc``).
    """
    return await member_service.list_members(db, page_request)


@router.get("/{member_id}", response_model=MemberDto)
async def get_member(
    member_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberDto:
    """회원 한 명을 조회합니다 — Retrieve one member."""
    return await member_service.get_member(db, member_id)


@router.post("/", response_model=MemberDto, status_code=201)
async def create_member(
    data: MemberCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberDto:
    """새 회원을 생성합니다 — Create a member, optionally in a team."""
    result: MemberDto = await member_service.create_member(db, data)
    await db.commit()
    return result
