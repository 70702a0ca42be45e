"""API Key 리소스 (/api/automation/api-keys)"""

from typing import Any, Sequence

from .base import DEFAULT_PAGE_SIZE, BaseResource, page_params

API_KEYS_PATH = "/api/automation/api-keys"


class APIKeysResource(BaseResource):
    async def list(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        return await self._client.request(
            "GET", API_KEYS_PATH, params=page_params(page, limit)
        )

    async def create(
        self,
        name: str,
        scopes: Sequence[str] | None = None,
        expires_at: str | None = None,
    ) -> dict[str, Any]:
        """API Key 생성

        Note: 원본 키(data.key)는 생성 응답에서만 확인할 수 있다.
        """
        payload: dict[str, Any] = {"name": name}
        if scopes is not None:
            payload["scopes"] = list(scopes)
        if expires_at:
            payload["expiresAt"] = expires_at

        return await self._client.request("POST", API_KEYS_PATH, json=payload)
