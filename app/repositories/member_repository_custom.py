"""회원 커스텀 레포지토리 조각.

Custom member repository fragment, mixed into MemberRepository for queries
that are easier to write by hand than to express through the generic base.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member


class MemberRepositoryCustom:
    """MemberRepository에 합쳐지는 사용자 정의 쿼리 모음."""

    async def find_member_custom(self, db: AsyncSession) -> list[Member]:
        result = await db.execute(select(Member))
        return list(result.scalars().all())
