"""
캔버스 리소스

디자인 캔버스의 요소 추가/수정/삭제와 크기, 배경 변경.
요소와 크기는 요청 전에 검증한다.
"""

from typing import Any

from ..validation import validate_canvas_dimensions, validate_element
from .base import BaseResource


class CanvasResource(BaseResource):
    """캔버스 요소 조작"""

    @staticmethod
    def _path(design_id: str) -> str:
        return f"/api/designs/{design_id}"

    async def add_element(self, design_id: str, element: dict[str, Any]) -> dict[str, Any]:
        """요소 추가

        Raises:
            ValidationError: 요소 검증 실패
        """
        validate_element(element)
        return await self._client.request(
            "POST", f"{self._path(design_id)}/elements", json={"element": element}
        )

    async def update_element(
        self, design_id: str, element_id: str, updates: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._client.request(
            "PATCH", f"{self._path(design_id)}/elements/{element_id}", json=updates
        )

    async def delete_element(self, design_id: str, element_id: str) -> dict[str, Any]:
        return await self._client.request(
            "DELETE", f"{self._path(design_id)}/elements/{element_id}"
        )

    async def get_elements(self, design_id: str) -> dict[str, Any]:
        """캔버스 요소 목록 조회 ({"data": {"elements": [...]}})"""
        return await self._client.request("GET", f"{self._path(design_id)}/canvas")

    async def resize(self, design_id: str, width: int, height: int) -> dict[str, Any]:
        """캔버스 크기 변경

        Raises:
            ValidationError: 크기 검증 실패 (1 ~ 10000px)
        """
        validate_canvas_dimensions(width, height)
        return await self._client.request(
            "PATCH",
            f"{self._path(design_id)}/canvas/resize",
            json={"width": width, "height": height},
        )

    async def clear(self, design_id: str) -> dict[str, Any]:
        """모든 요소 삭제"""
        return await self._client.request(
            "DELETE", f"{self._path(design_id)}/canvas/elements"
        )

    async def update_background(self, design_id: str, background: str) -> dict[str, Any]:
        return await self._client.request(
            "PATCH",
            f"{self._path(design_id)}/canvas/background",
            json={"background": background},
        )
