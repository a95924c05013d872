"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the paging request/response models (PageRequest, Sort, Page, Slice)
and helpers that turn a Select into a page of results.

Page numbers are zero-based: ``PageRequest.of(0, 3)`` is the first page.
"""

import math
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, computed_field
from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.exceptions import BadRequestError


class Direction(str, Enum):
    """정렬 방향 — Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """문자열을 정렬 방향으로 변환합니다 (대소문자 무시).

        Raises:
            BadRequestError: asc/desc가 아닐 때 (Unknown direction)
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise BadRequestError(f"Invalid sort direction '{value}'; use 'asc' or 'desc'") from None


class Order(BaseModel):
    """단일 정렬 조건 — A single ordering on one entity attribute."""

    attribute: str  # 정렬 대상 속성 이름 (Mapped attribute name, e.g. "username")
    direction: Direction = Direction.ASC


class Sort(BaseModel):
    """정렬 조건 목록 — Ordered list of sort orders."""

    orders: list[Order] = Field(default_factory=list)

    @classmethod
    def by(cls, direction: Direction, *attributes: str) -> "Sort":
        """같은 방향으로 여러 속성을 정렬합니다.

        Sort by ``attributes`` in the given direction, in order.
        """
        return cls(orders=[Order(attribute=a, direction=direction) for a in attributes])

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


class PageRequest(BaseModel):
    """페이지 요청 — Zero-based page number, page size and sort.

    Attributes:
        page: 요청 페이지 번호, 0부터 시작 (Page number, 0-based)
        size: 페이지 크기 (Items per page, > 0)
        sort: 정렬 조건 (Sort orders)
    """

    page: int = Field(0, ge=0)
    size: int = Field(20, gt=0)
    sort: Sort = Field(default_factory=Sort)

    @classmethod
    def of(cls, page: int, size: int, sort: Sort | None = None) -> "PageRequest":
        return cls(page=page, size=size, sort=sort or Sort())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return self.model_copy(update={"page": self.page + 1})


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.
    Contains the paginated items and metadata for client-side pagination controls.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 0-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[Any]  # 현재 페이지 항목 목록 (Paginated items)
    total: int  # 전체 항목 수 (Total item count)
    page: int  # 현재 페이지 번호 — 0부터 시작 (Current page, 0-indexed)
    per_page: int  # 페이지당 항목 수 (Items per page)
    pages: int  # 전체 페이지 수 (Total pages, computed: ceil(total/per_page))

    @classmethod
    def of(cls, items: Sequence[Any], total: int, page_request: PageRequest) -> "Page":
        return cls(
            items=list(items),
            total=total,
            page=page_request.page,
            per_page=page_request.size,
            pages=math.ceil(total / page_request.size),
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_first(self) -> bool:
        return self.page == 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.pages

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_last(self) -> bool:
        return not self.has_next

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def map(self, converter: Callable[[Any], Any]) -> "Page":
        """항목을 변환한 새 페이지를 반환합니다 (e.g. 엔티티 → DTO).

        Return a copy of this page with every item passed through ``converter``.
        """
        return self.model_copy(update={"items": [converter(item) for item in self.items]})


class Slice(BaseModel):
    """슬라이스 결과 모델 — 전체 개수 없이 다음 페이지 존재 여부만 포함.

    Slice of results without a total count; ``has_next`` is known from
    fetching one extra row.
    """

    items: list[Any]
    page: int
    per_page: int
    has_next: bool

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_first(self) -> bool:
        return self.page == 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, converter: Callable[[Any], Any]) -> "Slice":
        return self.model_copy(update={"items": [converter(item) for item in self.items]})


def apply_sort(query: Select, model: type, sort: Sort | None) -> Select:
    """모델의 매핑된 컬럼 속성으로 정렬을 적용합니다.

    Apply ``sort`` to ``query`` using the column attributes of ``model``.

    Raises:
        BadRequestError: 모델에 없는 속성일 때 (Attribute is not a mapped column)
    """
    if sort is None:
        return query

    column_attrs = inspect(model).column_attrs
    for order in sort.orders:
        if order.attribute not in column_attrs:
            raise BadRequestError(
                f"No property '{order.attribute}' found for type '{model.__name__}'"
            )
        column = getattr(model, order.attribute)
        query = query.order_by(column.desc() if order.direction is Direction.DESC else column.asc())
    return query


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate, already sorted)
        page_request: 페이지 요청 (Zero-based page and size)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회 — 정렬을 제거한 서브쿼리로 COUNT 실행 (Count total via unordered subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
    items: Sequence[Any] = result.scalars().all()

    return items, total


async def slice_query(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> Slice:
    """카운트 쿼리 없이 한 건을 더 조회하여 슬라이스를 만듭니다.

    Fetch ``size + 1`` rows to learn whether a next slice exists,
    without issuing a count query.
    """
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size + 1))
    rows: list[Any] = list(result.scalars().all())
    has_next: bool = len(rows) > page_request.size
    return Slice(
        items=rows[: page_request.size],
        page=page_request.page,
        per_page=page_request.size,
        has_next=has_next,
    )
