"""사용량 리소스 (크레딧, API 호출, 활동 내역)"""

from datetime import datetime
from typing import Any

from .base import DEFAULT_PAGE_SIZE, BaseResource, page_params

ANALYTICS_PERIODS = ("day", "week", "month", "year")


class UsageResource(BaseResource):
    async def get_stats(self) -> dict[str, Any]:
        """현재 사용량 통계"""
        return await self._client.request("GET", "/api/v1/usage/stats")

    async def get_history(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> dict[str, Any]:
        """사용 이력 조회

        Args:
            start_date: 시작 시각 (ISO 8601로 전송)
            end_date: 종료 시각 (ISO 8601로 전송)
        """
        params = page_params(page, limit)
        if start_date:
            params["startDate"] = start_date.isoformat()
        if end_date:
            params["endDate"] = end_date.isoformat()

        return await self._client.request("GET", "/api/v1/usage/history", params=params)

    async def get_api_stats(self) -> dict[str, Any]:
        """엔드포인트별 API 호출 통계"""
        return await self._client.request("GET", "/api/v1/usage/api-stats")

    async def get_activities(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        return await self._client.request(
            "GET", "/api/usage/activities", params=page_params(page, limit)
        )

    async def get_analytics(self, period: str = "month") -> dict[str, Any]:
        """사용량 분석 (period: day / week / month / year)"""
        return await self._client.request(
            "GET", "/api/usage/analytics", params={"period": period}
        )
