"""FastAPI 의존성 주입 모듈 — 페이지 요청 파싱.

FastAPI dependency injection module — builds a PageRequest from the
``page``, ``size`` and ``sort`` query parameters.

Query format:
    ?page=0&size=3&sort=username,desc&sort=age
"""

from typing import Annotated

from fastapi import Query

from app.config import settings
from app.utils.exceptions import BadRequestError
from app.utils.pagination import Direction, Order, PageRequest, Sort


def parse_sort(values: list[str] | None) -> Sort:
    """``attribute[,asc|desc]`` 형식의 정렬 파라미터를 해석합니다.

    Parse repeated ``sort`` parameters; the direction defaults to ascending.

    Raises:
        BadRequestError: 속성 이름이 비었거나 방향이 잘못된 경우
                         (Empty attribute or unknown direction)
    """
    orders: list[Order] = []
    for value in values or []:
        attribute, _, direction = value.partition(",")
        if not attribute.strip():
            raise BadRequestError(f"Invalid sort parameter '{value}'")
        orders.append(
            Order(
                attribute=attribute.strip(),
                direction=Direction.from_string(direction) if direction else Direction.ASC,
            )
        )
    return Sort(orders=orders)


async def get_page_request(
    page: Annotated[int, Query(ge=0, description="페이지 번호 (Page number)")] = 0,
    size: Annotated[int | None, Query(gt=0, description="페이지 크기 (Page size)")] = None,
    sort: Annotated[list[str] | None, Query(description="정렬 (e.g. username,desc)")] = None,
) -> PageRequest:
    """쿼리 파라미터에서 PageRequest를 생성합니다.

    Build a PageRequest; ``size`` falls back to DEFAULT_PAGE_SIZE and is
    capped at MAX_PAGE_SIZE. With PAGE_ONE_INDEXED the incoming page is
    1-based and converted to the zero-based request.
    """
    if settings.PAGE_ONE_INDEXED:
        page = max(page - 1, 0)
    page_size: int = min(size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return PageRequest.of(page, page_size, parse_sort(sort))
