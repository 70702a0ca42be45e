"""디자인 리소스 (/api/automation/designs)"""

from typing import Any, AsyncIterator

from .base import DEFAULT_ITERATE_PAGE_SIZE, DEFAULT_PAGE_SIZE, BaseResource, page_params, paginate

DESIGNS_PATH = "/api/automation/designs"


class DesignsResource(BaseResource):
    """디자인 CRUD"""

    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        is_template: bool | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        """디자인 목록 조회

        Args:
            page: 페이지 번호
            limit: 페이지 크기
            is_template: 템플릿 여부 필터
            status: DRAFT / PUBLISHED / ARCHIVED

        Returns:
            dict: {"data": [...], "pagination": {...}}
        """
        params = page_params(page, limit)
        if is_template is not None:
            params["isTemplate"] = "true" if is_template else "false"
        if status:
            params["status"] = status

        return await self._client.request("GET", DESIGNS_PATH, params=params)

    async def iterate_all(
        self,
        limit: int = DEFAULT_ITERATE_PAGE_SIZE,
        is_template: bool | None = None,
        status: str | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """모든 디자인 순회 (자동 페이지네이션)"""

        async def fetch_page(page: int, page_limit: int) -> dict[str, Any]:
            return await self.list(page, page_limit, is_template, status)

        async for design in paginate(fetch_page, limit):
            yield design

    async def create(
        self,
        name: str,
        canvas_data: dict[str, Any],
        description: str | None = None,
        width: int | None = None,
        height: int | None = None,
        is_template: bool | None = None,
        visibility: str | None = None,
    ) -> dict[str, Any]:
        """디자인 생성"""
        payload: dict[str, Any] = {"name": name, "canvasData": canvas_data}
        if description is not None:
            payload["description"] = description
        if width is not None:
            payload["width"] = width
        if height is not None:
            payload["height"] = height
        if is_template is not None:
            payload["isTemplate"] = is_template
        if visibility is not None:
            payload["visibility"] = visibility

        return await self._client.request("POST", DESIGNS_PATH, json=payload)

    async def get(self, design_id: str) -> dict[str, Any]:
        return await self._client.request("GET", f"{DESIGNS_PATH}/{design_id}")

    async def update(self, design_id: str, **changes: Any) -> dict[str, Any]:
        """디자인 수정

        Args:
            design_id: 디자인 ID
            **changes: 변경할 필드 (camelCase 와이어 이름, 예: canvasData=...)
        """
        return await self._client.request(
            "PATCH", f"{DESIGNS_PATH}/{design_id}", json=changes
        )

    async def delete(self, design_id: str) -> None:
        await self._client.request("DELETE", f"{DESIGNS_PATH}/{design_id}")
