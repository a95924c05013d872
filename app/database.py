"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
PostgreSQL (asyncpg) is the default target; SQLite (aiosqlite) is supported
for local runs and tests.
"""

from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from app.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """드라이버에 맞는 옵션으로 비동기 엔진을 생성합니다.

    Create an async engine configured for the URL's dialect.

    Args:
        database_url: 비동기 DB URL (e.g. postgresql+asyncpg://..., sqlite+aiosqlite://...)
        echo: SQL 로그 출력 여부 (Echo emitted SQL)

    Returns:
        AsyncEngine: 생성된 엔진 (Configured async engine)
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        # 인메모리 DB는 연결마다 별도 DB이므로 단일 연결 공유
        # In-memory databases are per-connection; share a single one
        if ":memory:" in database_url or database_url.endswith("://"):
            kwargs["poolclass"] = StaticPool
        sqlite_engine: AsyncEngine = create_async_engine(database_url, echo=echo, **kwargs)

        # SQLite는 기본적으로 FK 제약을 검사하지 않음 — Enable FK enforcement
        @event.listens_for(sqlite_engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn, connection_record) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return sqlite_engine

    # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        # 트랜잭션 모드 풀러(pgbouncer 등)에서 prepared statement 비활성화
        # Disable prepared statement caches for transaction-mode pooling
        connect_args={"statement_cache_size": 0},
    )


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    AsyncAttrs exposes ``obj.awaitable_attrs.<name>`` so lazy relationships
    can be loaded from async code.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is automatically closed after the request completes,
    ensuring no connection leaks.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
