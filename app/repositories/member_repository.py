"""회원 레포지토리 — 기본 CRUD + 회원 전용 쿼리.

Member Repository — generic CRUD from BaseRepository plus member queries:
name/age finders, inline queries, DTO projection, paging and slicing,
bulk update, fetch join and entity graph loading, the read-only hint and a
pessimistic lock. Hand-written extras come from MemberRepositoryCustom.
"""

from collections.abc import Iterable

from sqlalchemy import Select, Update, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from app.models.member import Member
from app.models.team import Team
from app.repositories.base import BaseRepository
from app.repositories.member_repository_custom import MemberRepositoryCustom
from app.schemas.member import MemberDto
from app.utils.pagination import Page, PageRequest, Slice, apply_sort, slice_query


class MemberRepository(MemberRepositoryCustom, BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        """MemberRepository를 초기화합니다.

        Initialize the MemberRepository with the Member model.
        """
        super().__init__(Member)

    async def find_by_username_and_age_greater_than(
        self,
        db: AsyncSession,
        username: str,
        age: int,
    ) -> list[Member]:
        """이름이 같고 나이가 ``age``보다 많은 회원을 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            username: 회원 이름 (Exact username)
            age: 기준 나이, 이 나이는 제외 (Exclusive lower bound)

        Returns:
            list[Member]: 회원 목록 (Matching members)
        """
        query: Select = select(Member).where(Member.username == username, Member.age > age)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        result = await db.execute(select(Member).where(Member.username == username))
        return list(result.scalars().all())

    async def find_member(self, db: AsyncSession, username: str, age: int) -> list[Member]:
        """이름과 나이가 모두 같은 회원을 조회합니다.

        Members matching both ``username`` and ``age`` exactly.
        """
        query: Select = select(Member).where(Member.username == username).where(Member.age == age)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_username_list(self, db: AsyncSession) -> list[str]:
        """모든 회원의 이름 목록 (중복 포함) — All usernames, duplicates kept."""
        result = await db.execute(select(Member.username))
        return list(result.scalars().all())

    async def find_member_dto(self, db: AsyncSession) -> list[MemberDto]:
        """회원과 팀을 조인하여 DTO로 조회합니다.

        Project (member id, username, team name) over an inner join, so
        members without a team are not returned.

        Returns:
            list[MemberDto]: 회원 DTO 목록 (Projected rows)
        """
        query: Select = select(Member.id, Member.username, Team.name).join(Member.team)
        result = await db.execute(query)
        return [
            MemberDto(id=member_id, username=username, team_name=team_name)
            for member_id, username, team_name in result.all()
        ]

    async def find_by_names(self, db: AsyncSession, names: Iterable[str]) -> list[Member]:
        """이름 목록에 포함된 회원을 조회합니다 — ``username IN (...)``."""
        query: Select = select(Member).where(Member.username.in_(list(names)))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_list_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """컬렉션 반환 — 결과가 없으면 빈 리스트 (Empty list when nothing matches)."""
        return await self.find_by_username(db, username)

    async def find_member_by_username(self, db: AsyncSession, username: str) -> Member | None:
        """단건 반환 — 결과가 없으면 None.

        Single result. ``MultipleResultsFound`` propagates when the username
        is shared by several members.
        """
        result = await db.execute(select(Member).where(Member.username == username))
        return result.scalar_one_or_none()

    async def find_by_age(self, db: AsyncSession, age: int, page_request: PageRequest) -> Page:
        """나이로 회원을 페이지 조회합니다 (전체 개수 포함).

        Page of members aged ``age`` with the total count.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            age: 조회할 나이 (Exact age)
            page_request: 페이지 요청 (Zero-based page, size and sort)

        Returns:
            Page: 회원 페이지 (Page of Member entities)
        """
        query: Select = select(Member).where(Member.age == age)
        return await self.find_page(db, page_request, query)

    async def find_slice_by_age(self, db: AsyncSession, age: int, page_request: PageRequest) -> Slice:
        """나이로 회원을 슬라이스 조회합니다 (카운트 쿼리 없음).

        Slice of members aged ``age``; no count query is issued.
        """
        query: Select = apply_sort(select(Member).where(Member.age == age), Member, page_request.sort)
        return await slice_query(db, query, page_request)

    async def bulk_age_plus(self, db: AsyncSession, age: int) -> int:
        """나이가 ``age`` 이상인 회원의 나이를 1 증가시킵니다.

        Bulk UPDATE, then clear the session so later reads see the new ages.
        Pending changes are flushed by autoflush before the UPDATE runs.

        Returns:
            int: 변경된 행 수 (Number of updated rows)
        """
        statement: Update = (
            update(Member)
            .where(Member.age >= age)
            .values(age=Member.age + 1)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(statement)
        # 영속성 컨텍스트 초기화 — 벌크 연산은 세션의 객체를 갱신하지 않음
        # Clear the session; bulk statements do not refresh loaded instances
        db.expunge_all()
        return result.rowcount

    async def find_member_fetch_join(self, db: AsyncSession) -> list[Member]:
        """회원과 팀을 페치 조인으로 한 번에 조회합니다.

        Inner join to team and populate ``member.team`` from the same row,
        avoiding one extra query per member.
        """
        query: Select = select(Member).join(Member.team).options(contains_eager(Member.team))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_member_entity_graph(self, db: AsyncSession) -> list[Member]:
        """모든 회원을 팀과 함께 조회합니다 — all members, team eager-loaded."""
        query: Select = select(Member).options(selectinload(Member.team))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_entity_graph_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """이름 있는 엔티티 그래프 "Member.all"로 회원을 조회합니다.

        Load members named ``username`` through the ``"Member.all"`` graph.
        """
        query: Select = (
            select(Member)
            .where(Member.username == username)
            .options(*self.entity_graph("Member.all"))
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_read_only_by_username(self, db: AsyncSession, username: str) -> Member | None:
        """읽기 전용으로 회원을 조회합니다.

        Read-only lookup: the instance is detached from the session after
        loading, so changes made to it are never flushed (no dirty checking).
        An instance the session already managed before the call is returned
        as-is and stays managed.
        """
        # 조회 전부터 세션에 있던 객체 — Instances managed before the query (pending included)
        held: dict[int, object] = {id(obj): obj for obj in (*db.identity_map.values(), *db.new)}
        member: Member | None = await self.find_member_by_username(db, username)
        if member is not None and id(member) not in held:
            db.expunge(member)
        return member

    async def find_lock_by_username(self, db: AsyncSession, username: str) -> list[Member]:
        """비관적 쓰기 락으로 회원을 조회합니다 — ``SELECT ... FOR UPDATE``.

        Dialects without row locks (SQLite) ignore the clause.
        """
        query: Select = select(Member).where(Member.username == username).with_for_update()
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
