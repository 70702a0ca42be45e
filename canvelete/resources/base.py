"""
리소스 공통 기반

페이지 파라미터 생성과 자동 페이지 순회.
"""

from typing import TYPE_CHECKING, Any, AsyncIterator, Awaitable, Callable

if TYPE_CHECKING:
    from ..client import CanveleteClient

DEFAULT_PAGE_SIZE = 20
DEFAULT_ITERATE_PAGE_SIZE = 50


class BaseResource:
    """API 리소스 기반 클래스"""

    def __init__(self, client: "CanveleteClient"):
        self._client = client


def page_params(page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, str]:
    """페이지 쿼리 파라미터"""
    return {"page": str(page), "limit": str(limit)}


async def paginate(
    fetch_page: Callable[[int, int], Awaitable[dict[str, Any]]],
    limit: int = DEFAULT_ITERATE_PAGE_SIZE,
) -> AsyncIterator[dict[str, Any]]:
    """페이지 응답({"data": [...], "pagination": {...}})을 항목 단위로 순회

    빈 페이지 또는 page >= totalPages에서 종료한다.

    Args:
        fetch_page: (page, limit) → 페이지 응답
        limit: 페이지 크기
    """
    page = 1
    while True:
        response = await fetch_page(page, limit)
        items = response.get("data") or []
        if not items:
            break

        for item in items:
            yield item

        total_pages = (response.get("pagination") or {}).get("totalPages") or 1
        if page >= total_pages:
            break
        page += 1
