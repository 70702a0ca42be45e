"""결제 리소스 (구독, 크레딧, 청구서, 팀 좌석)"""

from typing import Any

from .base import DEFAULT_PAGE_SIZE, BaseResource, page_params

BILLING_PATH = "/api/v1/billing"


class BillingResource(BaseResource):
    async def get_info(self) -> dict[str, Any]:
        """구독 및 결제 정보"""
        return await self._client.request("GET", f"{BILLING_PATH}/info")

    async def get_invoices(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        return await self._client.request(
            "GET", f"{BILLING_PATH}/invoices", params=page_params(page, limit)
        )

    async def get_summary(self) -> dict[str, Any]:
        return await self._client.request("GET", f"{BILLING_PATH}/summary")

    async def purchase_credits(
        self, amount: int, payment_method_id: str | None = None
    ) -> dict[str, Any]:
        """크레딧 추가 구매"""
        payload: dict[str, Any] = {"creditAmount": amount}
        if payment_method_id:
            payload["paymentMethodId"] = payment_method_id

        return await self._client.request(
            "POST", f"{BILLING_PATH}/credits/purchase", json=payload
        )

    async def get_seats(self) -> dict[str, Any]:
        """팀 좌석 정보"""
        return await self._client.request("GET", f"{BILLING_PATH}/seats")

    async def add_seats(self, count: int) -> dict[str, Any]:
        return await self._client.request(
            "POST", f"{BILLING_PATH}/seats/add", json={"count": count}
        )

    async def remove_seats(self, count: int) -> dict[str, Any]:
        return await self._client.request(
            "DELETE", f"{BILLING_PATH}/seats/remove", json={"count": count}
        )

    async def get_portal_url(self) -> dict[str, Any]:
        """결제 포털 URL ({"url": ...})"""
        return await self._client.request("GET", "/api/billing/portal")
