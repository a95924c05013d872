"""회원 서비스 — 회원 조회/생성 비즈니스 로직.

Member Service — Business logic for reading and creating members.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.models.team import Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository
from app.schemas.member import MemberCreate, MemberDto, MemberPage
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Page, PageRequest


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스."""

    async def get_member(self, db: AsyncSession, member_id: int) -> MemberDto:
        """회원 한 명을 팀 이름과 함께 조회합니다.

        Retrieve one member with its team name.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        query: Select = (
            select(Member)
            .where(Member.id == member_id)
            .options(*member_repository.entity_graph("Member.all"))
        )
        member: Member | None = (await db.execute(query)).scalar_one_or_none()
        if member is None:
            raise NotFoundError("Member not found")
        return MemberDto.from_member(member)

    async def list_members(self, db: AsyncSession, page_request: PageRequest) -> MemberPage:
        """회원 목록을 페이지 단위로 조회합니다.

        List members one page at a time, converted to DTOs.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_request: 페이지 요청 (Page, size and sort)

        Returns:
            MemberPage: 회원 DTO 페이지 (Page of member DTOs)
        """
        query: Select = select(Member).options(*member_repository.entity_graph("Member.all"))
        page: Page = await member_repository.find_page(db, page_request, query)
        dtos: Page = page.map(MemberDto.from_member)
        return MemberPage.of(dtos.items, page.total, page_request)

    async def create_member(self, db: AsyncSession, data: MemberCreate) -> MemberDto:
        """새 회원을 생성합니다.

        Create a member, optionally joining an existing team.

        Raises:
            NotFoundError: 팀을 찾을 수 없을 때 (Team not found)
        """
        team: Team | None = None
        if data.team_id is not None:
            team = await team_repository.find_by_id(db, data.team_id)
            if team is None:
                raise NotFoundError("Team not found")

        member: Member = await member_repository.save(
            db, Member(username=data.username, age=data.age, team=team)
        )
        return MemberDto.from_member(member)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
