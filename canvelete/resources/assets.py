"""에셋 리소스 (업로드 에셋, 스톡 이미지/아이콘/클립아트/일러스트, 폰트)"""

from typing import Any

from .base import DEFAULT_PAGE_SIZE, BaseResource, page_params

ASSETS_PATH = "/api/assets"


def _search_params(query: str, page: int, per_page: int) -> dict[str, str]:
    return {"query": query, "page": str(page), "perPage": str(per_page)}


class AssetsResource(BaseResource):
    """사용자 에셋 관리 및 스톡 콘텐츠 검색"""

    async def list(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        type: str | None = None,
    ) -> dict[str, Any]:
        """업로드한 에셋 목록 (type: IMAGE / FONT / VIDEO / AUDIO)"""
        params = page_params(page, limit)
        if type:
            params["type"] = type

        return await self._client.request("GET", f"{ASSETS_PATH}/library", params=params)

    async def get(self, asset_id: str) -> dict[str, Any]:
        return await self._client.request("GET", f"{ASSETS_PATH}/{asset_id}")

    async def delete(self, asset_id: str) -> dict[str, Any]:
        return await self._client.request("DELETE", f"{ASSETS_PATH}/{asset_id}")

    async def search_stock_images(
        self, query: str, page: int = 1, per_page: int = DEFAULT_PAGE_SIZE
    ) -> dict[str, Any]:
        """스톡 이미지 검색 (Pixabay)"""
        return await self._client.request(
            "GET",
            f"{ASSETS_PATH}/stock-images",
            params=_search_params(query, page, per_page),
        )

    async def search_icons(
        self, query: str, page: int = 1, per_page: int = DEFAULT_PAGE_SIZE
    ) -> dict[str, Any]:
        return await self._client.request(
            "GET", f"{ASSETS_PATH}/icons", params=_search_params(query, page, per_page)
        )

    async def search_clipart(
        self,
        query: str,
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
        tag: str | None = None,
    ) -> dict[str, Any]:
        params = _search_params(query, page, per_page)
        if tag:
            params["tag"] = tag

        return await self._client.request("GET", f"{ASSETS_PATH}/clipart", params=params)

    async def search_illustrations(
        self,
        query: str,
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
        category: str | None = None,
    ) -> dict[str, Any]:
        params = _search_params(query, page, per_page)
        if category:
            params["category"] = category

        return await self._client.request(
            "GET", f"{ASSETS_PATH}/illustrations", params=params
        )

    async def list_fonts(self, category: str | None = None) -> dict[str, Any]:
        """사용 가능한 폰트 목록"""
        params: dict[str, str] = {}
        if category:
            params["category"] = category

        return await self._client.request("GET", f"{ASSETS_PATH}/fonts", params=params)
