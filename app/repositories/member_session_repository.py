"""회원 순수 세션 레포지토리 — 세션만으로 직접 작성한 쿼리.

Member session repository — every query written by hand against the
AsyncSession, without the generic BaseRepository. Kept side by side with
MemberRepository to show what the generic layer saves.
"""

from sqlalchemy import Select, Update, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member


class MemberSessionRepository:
    """회원 테이블에 대한 수작업 쿼리 레포지토리.

    Hand-written repository over the members table.
    """

    async def save(self, db: AsyncSession, member: Member) -> Member:
        db.add(member)
        await db.flush()
        return member

    async def delete(self, db: AsyncSession, member: Member) -> None:
        await db.delete(member)
        await db.flush()

    async def find_all(self, db: AsyncSession) -> list[Member]:
        result = await db.execute(select(Member))
        return list(result.scalars().all())

    async def find_by_id(self, db: AsyncSession, member_id: int) -> Member | None:
        return await db.get(Member, member_id)

    async def find(self, db: AsyncSession, member_id: int) -> Member:
        """ID로 회원을 조회합니다. 없으면 NoResultFound가 발생합니다.

        Retrieve a member that must exist; raises ``NoResultFound`` otherwise.
        """
        return await db.get_one(Member, member_id)

    async def count(self, db: AsyncSession) -> int:
        query: Select = select(func.count()).select_from(Member)
        return (await db.execute(query)).scalar_one()

    async def find_by_username_and_age_greater_than(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> list[Member]:
        """이름이 같고 나이가 더 많은 회원을 조회합니다.

        Members named ``username`` strictly older than ``age``.
        """
        query: Select = select(Member).where(Member.username == username, Member.age > age)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        result = await db.execute(select(Member).where(Member.username == username))
        return list(result.scalars().all())

    async def find_by_page(
        self,
        db: AsyncSession,
        age: int,
        offset: int,
        limit: int,
    ) -> list[Member]:
        """나이가 같은 회원을 이름 역순으로 offset/limit 조회합니다.

        One window of members aged ``age``, ordered by username descending.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            age: 조회할 나이 (Exact age to match)
            offset: 건너뛸 행 수 (Rows to skip)
            limit: 최대 행 수 (Maximum rows to return)

        Returns:
            list[Member]: 회원 목록 (Members in the window)
        """
        query: Select = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.username.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def total_count(self, db: AsyncSession, age: int) -> int:
        query: Select = select(func.count()).select_from(Member).where(Member.age == age)
        return (await db.execute(query)).scalar_one()

    async def bulk_age_plus(self, db: AsyncSession, age: int) -> int:
        """나이가 ``age`` 이상인 회원의 나이를 1 증가시킵니다.

        Bulk UPDATE bypassing the unit of work: no per-row events, no dirty
        checking. Members already in the session are synchronised by the
        ORM (evaluated in Python, or re-fetched when that is not possible).

        Returns:
            int: 변경된 행 수 (Number of updated rows)
        """
        statement: Update = (
            update(Member)
            .where(Member.age >= age)
            .values(age=Member.age + 1)
        )
        result = await db.execute(statement)
        return result.rowcount


# 싱글턴 인스턴스 — Singleton instance
member_session_repository: MemberSessionRepository = MemberSessionRepository()
