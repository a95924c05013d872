"""초기 데이터 시드 스크립트 — 팀과 샘플 회원 생성.

Seed script — Creates sample teams and members for trying out paging.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: user0 ~ user99, 나이 = 번호, 짝수는 teamA / 홀수는 teamB
      (100 members, age = index, even indexes in teamA, odd in teamB)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.auditing import auditor_context
from app.database import Base, async_session, engine
from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository

MEMBER_COUNT: int = 100


async def seed(
    db_engine: AsyncEngine = engine,
    session_factory: async_sessionmaker[AsyncSession] = async_session,
) -> bool:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if they don't exist, then insert the sample teams and
    members.

    Idempotent: 이미 회원이 있으면 건너뜁니다 (Skips if members already exist).

    Returns:
        bool: 시드 수행 여부 (True when data was inserted)
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as db:
        if await member_repository.count(db) > 0:
            print("Already seeded. Skipping.")
            return False

        with auditor_context("seed"):
            team_a, team_b = await team_repository.save_all(db, [Team("teamA"), Team("teamB")])
            await member_repository.save_all(
                db,
                [
                    Member(f"user{i}", i, team_a if i % 2 == 0 else team_b)
                    for i in range(MEMBER_COUNT)
                ],
            )
            await db.commit()

    print(f"Seeded 2 teams and {MEMBER_COUNT} members.")
    return True


if __name__ == "__main__":
    asyncio.run(seed())
