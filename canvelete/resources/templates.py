"""템플릿 리소스"""

from typing import Any, AsyncIterator

from .base import DEFAULT_ITERATE_PAGE_SIZE, DEFAULT_PAGE_SIZE, BaseResource, page_params, paginate
from .designs import DESIGNS_PATH

TEMPLATES_PATH = "/api/automation/templates"


class TemplatesResource(BaseResource):
    """템플릿 조회, 적용, 생성"""

    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        my_only: bool = False,
        search: str | None = None,
        category: str | None = None,
    ) -> dict[str, Any]:
        """템플릿 목록 조회"""
        params = page_params(page, limit)
        if my_only:
            params["myOnly"] = "true"
        if search:
            params["search"] = search
        if category:
            params["category"] = category

        return await self._client.request("GET", TEMPLATES_PATH, params=params)

    async def iterate_all(
        self,
        limit: int = DEFAULT_ITERATE_PAGE_SIZE,
        my_only: bool = False,
        search: str | None = None,
        category: str | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """모든 템플릿 순회 (자동 페이지네이션)"""

        async def fetch_page(page: int, page_limit: int) -> dict[str, Any]:
            return await self.list(page, page_limit, my_only, search, category)

        async for template in paginate(fetch_page, limit):
            yield template

    async def get(self, template_id: str) -> dict[str, Any]:
        """템플릿 조회 (템플릿도 디자인 엔드포인트로 조회)"""
        return await self._client.request("GET", f"{DESIGNS_PATH}/{template_id}")

    async def apply(
        self,
        design_id: str,
        template_id: str,
        dynamic_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """디자인에 템플릿 적용"""
        payload: dict[str, Any] = {"templateId": template_id}
        if dynamic_data:
            payload["dynamicData"] = dynamic_data

        return await self._client.request(
            "POST", f"{DESIGNS_PATH}/{design_id}/apply-template", json=payload
        )

    async def create(
        self,
        design_id: str,
        name: str,
        description: str | None = None,
        category: str | None = None,
    ) -> dict[str, Any]:
        """기존 디자인으로 템플릿 생성"""
        payload: dict[str, Any] = {"name": name}
        if description:
            payload["description"] = description
        if category:
            payload["category"] = category

        return await self._client.request(
            "POST", f"{DESIGNS_PATH}/{design_id}/save-as-template", json=payload
        )
