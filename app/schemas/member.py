"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
MemberDto doubles as the projection target of the member/team join query.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from app.utils.pagination import Page

if TYPE_CHECKING:
    from app.models.member import Member


class MemberDto(BaseModel):
    """회원 조회 DTO.

    Member view with its team name flattened in.

    Attributes:
        id: 회원 ID (Member identifier)
        username: 회원 이름 (Username)
        team_name: 팀 이름 (Team name, None when the member has no team)
    """

    id: int
    username: str | None = None
    team_name: str | None = None

    @classmethod
    def from_member(cls, member: "Member") -> "MemberDto":
        """엔티티를 DTO로 변환합니다. team이 이미 로드되어 있어야 합니다.

        Build from an entity; ``member.team`` must already be loaded.
        """
        return cls(
            id=member.id,
            username=member.username,
            team_name=member.team.name if member.team is not None else None,
        )


class MemberCreate(BaseModel):
    """회원 생성 요청 스키마.

    Attributes:
        username: 회원 이름 (Username)
        age: 나이 (Age, >= 0)
        team_id: 소속 팀 ID (Team to join, optional)
    """

    username: str = Field(..., min_length=1, max_length=255)
    age: int = Field(0, ge=0)
    team_id: int | None = None


class MemberPage(Page):
    """회원 DTO 페이지 응답 — Page of MemberDto for API responses."""

    items: list[MemberDto]
