"""팀 관련 Pydantic 요청/응답 스키마 정의.

Team Pydantic request/response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class TeamCreate(BaseModel):
    """팀 생성 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=255)


class TeamResponse(BaseModel):
    """팀 응답 스키마.

    Attributes:
        id: 팀 ID (Team identifier)
        name: 팀 이름 (Team name)
        member_count: 소속 회원 수 (Number of members)
        created_by: 생성자 (Auditor who created the team)
        created_date: 생성 일시 (Creation timestamp)
    """

    id: int
    name: str
    member_count: int = 0
    created_by: str | None = None
    created_date: datetime | None = None
