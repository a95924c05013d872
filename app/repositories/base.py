"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides the generic operations every entity gets for free: save, lookup by
id, listing with sort, paging, counting and deletion. Domain repositories
extend it and add their own queries.

Usage:
    class TeamRepository(BaseRepository[Team]):
        def __init__(self) -> None:
            super().__init__(Team)
"""

from collections.abc import Iterable
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import ORMOption

from app.database import Base
from app.utils.pagination import Page, PageRequest, Sort, apply_sort, paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Repositories are stateless; the session is passed to every call so the
    caller owns the transaction boundary.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def is_new(self, entity: ModelType) -> bool:
        """엔티티가 신규인지 판단합니다.

        Decide whether ``entity`` has never been persisted.
        Entities exposing ``is_new()`` answer for themselves (caller-assigned
        ids); otherwise an entity is new when its primary key is unset.
        """
        if hasattr(entity, "is_new"):
            return entity.is_new()
        identity = inspect(self.model).primary_key_from_instance(entity)
        return all(value is None for value in identity)

    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """엔티티를 저장합니다.

        Persist a new entity or merge a detached one.
        New entities are added and flushed so generated ids are available;
        the same instance is returned. Existing entities are merged and the
        managed instance is returned, which may be a different object.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Entity to save)

        Returns:
            ModelType: 영속 상태의 엔티티 (Managed entity)
        """
        if self.is_new(entity):
            db.add(entity)
        else:
            entity = await db.merge(entity)
        await db.flush()
        return entity

    async def save_all(self, db: AsyncSession, entities: Iterable[ModelType]) -> list[ModelType]:
        """여러 엔티티를 저장합니다.

        Save ``entities`` and return the managed instances in input order.
        All new entities join the session before anything is flushed, so an
        entity already linked to a persistent parent (``Member(name, age,
        team)``) is never flushed through the parent's collection while it
        is still outside the session.
        """
        entities = list(entities)
        new_flags: list[bool] = [self.is_new(entity) for entity in entities]
        db.add_all([entity for entity, is_new in zip(entities, new_flags) if is_new])
        saved: list[ModelType] = [
            entity if is_new else await db.merge(entity)
            for entity, is_new in zip(entities, new_flags)
        ]
        await db.flush()
        return saved

    async def find_by_id(self, db: AsyncSession, record_id: Any) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by primary key. The identity map is consulted
        first, so an instance already in the session is returned as-is.

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id)

    async def find_all(self, db: AsyncSession, sort: Sort | None = None) -> list[ModelType]:
        """모든 레코드를 조회합니다.

        Retrieve all records, optionally sorted.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            sort: 정렬 조건 (Sort orders; unknown attributes raise BadRequestError)

        Returns:
            list[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select = apply_sort(select(self.model), self.model, sort)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_by_ids(self, db: AsyncSession, record_ids: Iterable[Any]) -> list[ModelType]:
        """여러 ID로 레코드를 조회합니다 — Retrieve records whose id is in ``record_ids``."""
        pk_column = inspect(self.model).primary_key[0]
        query: Select = select(self.model).where(pk_column.in_(list(record_ids)))
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_page(
        self,
        db: AsyncSession,
        page_request: PageRequest,
        query: Select | None = None,
    ) -> Page:
        """페이지네이션이 적용된 레코드 목록을 조회합니다.

        Retrieve one page of records.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_request: 페이지 요청 (Page, size and sort)
            query: 기본 SELECT 쿼리, None이면 전체 조회
                   (Base SELECT query; defaults to all records)

        Returns:
            Page: 레코드 목록과 전체 개수 (Items plus total count metadata)
        """
        base_query: Select = query if query is not None else select(self.model)
        base_query = apply_sort(base_query, self.model, page_request.sort)
        items, total = await paginate(db, base_query, page_request)
        return Page.of(items, total, page_request)

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 — Count all records."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def exists_by_id(self, db: AsyncSession, record_id: Any) -> bool:
        """주어진 ID의 레코드가 존재하는지 확인합니다.

        Check whether a record with the given id exists.
        """
        pk_column = inspect(self.model).primary_key[0]
        query: Select = select(func.count()).select_from(self.model).where(pk_column == record_id)
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0

    async def delete(self, db: AsyncSession, entity: ModelType) -> None:
        """엔티티를 삭제합니다 — Delete ``entity`` and flush."""
        await db.delete(entity)
        await db.flush()

    async def delete_by_id(self, db: AsyncSession, record_id: Any) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its id.

        Returns:
            bool: 삭제 성공 여부 (Whether the deletion was successful)
        """
        db_obj: ModelType | None = await self.find_by_id(db, record_id)
        if db_obj is None:
            return False

        await self.delete(db, db_obj)
        return True

    async def flush(self, db: AsyncSession) -> None:
        """보류 중인 변경을 DB에 반영합니다 (커밋하지 않음).

        Write pending changes of managed entities to the database without
        committing, e.g. after modifying an entity returned by a finder.
        """
        await db.flush()

    def entity_graph(self, name: str) -> list[ORMOption]:
        """모델에 선언된 이름 있는 엔티티 그래프의 로더 옵션을 반환합니다.

        Loader options for a named entity graph declared on the model as
        ``__entity_graphs__ = {name: (relationship, ...)}``.

        Raises:
            KeyError: 선언되지 않은 그래프 이름 (Unknown graph name)
        """
        graphs: dict[str, Sequence[str]] = getattr(self.model, "__entity_graphs__", {})
        if name not in graphs:
            raise KeyError(f"No entity graph '{name}' declared on {self.model.__name__}")
        return [selectinload(getattr(self.model, attribute)) for attribute in graphs[name]]
