"""
렌더링 리소스

동기 렌더링(바이너리 응답), 비동기 렌더링 작업, 배치 렌더링과
완료 대기를 제공한다.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Sequence

from ..errors import ValidationError
from ..polling import (
    DEFAULT_BATCH_POLL_INTERVAL,
    DEFAULT_BATCH_TIMEOUT,
    DEFAULT_JOB_POLL_INTERVAL,
    DEFAULT_JOB_TIMEOUT,
    wait_for_batch,
    wait_for_completion,
)
from ..types import AsyncRenderResponse, BatchRenderResponse, BatchStatus, RenderRecord
from ..validation import validate_render_options
from .base import DEFAULT_ITERATE_PAGE_SIZE, DEFAULT_PAGE_SIZE, BaseResource, page_params, paginate

logger = logging.getLogger(__name__)

RENDER_PATH = "/api/v1/render"

DEFAULT_FORMAT = "png"
DEFAULT_QUALITY = 90


def _render_payload(
    design_id: str | None = None,
    template_id: str | None = None,
    dynamic_data: dict[str, Any] | None = None,
    dynamic_elements: dict[str, Any] | None = None,
    format: str | None = None,
    width: int | None = None,
    height: int | None = None,
    quality: int | None = None,
) -> dict[str, Any]:
    """렌더링 요청 바디 생성 (검증 포함)"""
    validate_render_options(
        {
            "design_id": design_id,
            "template_id": template_id,
            "format": format,
            "quality": quality,
        }
    )

    payload: dict[str, Any] = {
        "format": format or DEFAULT_FORMAT,
        "quality": quality or DEFAULT_QUALITY,
    }
    if design_id:
        payload["designId"] = design_id
    if template_id:
        payload["templateId"] = template_id
    if dynamic_data:
        payload["dynamicData"] = dynamic_data
    if dynamic_elements:
        payload["dynamicElements"] = dynamic_elements
    if width:
        payload["width"] = width
    if height:
        payload["height"] = height
    return payload


class RenderResource(BaseResource):
    """렌더링 작업 생성 및 관리"""

    async def create(
        self,
        design_id: str | None = None,
        template_id: str | None = None,
        dynamic_data: dict[str, Any] | None = None,
        dynamic_elements: dict[str, Any] | None = None,
        format: str | None = None,
        width: int | None = None,
        height: int | None = None,
        quality: int | None = None,
        output_file: str | Path | None = None,
    ) -> bytes:
        """동기 렌더링 (완료된 이미지 바이트 반환)

        Args:
            design_id: 디자인 ID (template_id와 둘 중 하나 필수)
            template_id: 템플릿 ID
            dynamic_data: 동적 필드 값
            dynamic_elements: 동적 요소 값
            format: png / jpg / jpeg / pdf / svg
            width: 출력 너비
            height: 출력 높이
            quality: 1 ~ 100
            output_file: 지정 시 결과를 파일로 저장

        Returns:
            bytes: 렌더링 결과

        Raises:
            ValidationError: 옵션 검증 실패
        """
        payload = _render_payload(
            design_id, template_id, dynamic_data, dynamic_elements,
            format, width, height, quality,
        )
        image_data: bytes = await self._client.request(
            "POST", RENDER_PATH, json=payload, binary=True
        )

        if output_file:
            Path(output_file).write_bytes(image_data)
            logger.info(f"Render saved to {output_file} ({len(image_data)} bytes)")

        return image_data

    async def create_async(
        self,
        design_id: str | None = None,
        template_id: str | None = None,
        dynamic_data: dict[str, Any] | None = None,
        format: str | None = None,
        width: int | None = None,
        height: int | None = None,
        quality: int | None = None,
    ) -> AsyncRenderResponse:
        """비동기 렌더링 작업 제출 (즉시 반환)"""
        payload = _render_payload(
            design_id, template_id, dynamic_data, None,
            format, width, height, quality,
        )
        payload["async"] = True

        data = await self._client.request("POST", f"{RENDER_PATH}/async", json=payload)
        return AsyncRenderResponse.model_validate(data)

    async def get_status(self, job_id: str) -> RenderRecord:
        """렌더링 작업 상태 조회"""
        data = await self._client.request("GET", f"{RENDER_PATH}/status/{job_id}")
        return RenderRecord.model_validate(data)

    async def wait_for_completion(
        self,
        job_id: str,
        timeout: float = DEFAULT_JOB_TIMEOUT,
        poll_interval: float = DEFAULT_JOB_POLL_INTERVAL,
        cancel_event: asyncio.Event | None = None,
        on_status: Callable[[RenderRecord], None] | None = None,
    ) -> RenderRecord:
        """렌더링 작업 완료까지 대기

        Raises:
            RenderJobFailedError: 렌더링 실패
            WaitTimeoutError: 타임아웃 초과
        """
        return await wait_for_completion(
            lambda: self.get_status(job_id),
            timeout=timeout,
            poll_interval=poll_interval,
            cancel_event=cancel_event,
            on_status=on_status,
        )

    async def batch_create(
        self,
        renders: Sequence[dict[str, Any]],
        webhook: str | None = None,
    ) -> BatchRenderResponse:
        """배치 렌더링 작업 제출

        Args:
            renders: 렌더링 옵션 목록 (create_async와 같은 snake_case 키)
            webhook: 배치 완료 알림 URL

        Raises:
            ValidationError: 빈 목록 또는 옵션 검증 실패
        """
        if not renders:
            raise ValidationError("At least one render is required")
        for options in renders:
            validate_render_options(options)

        payload: dict[str, Any] = {
            "renders": [
                {
                    "designId": r.get("design_id"),
                    "templateId": r.get("template_id"),
                    "dynamicData": r.get("dynamic_data"),
                    "format": r.get("format") or DEFAULT_FORMAT,
                    "quality": r.get("quality") or DEFAULT_QUALITY,
                    "width": r.get("width"),
                    "height": r.get("height"),
                }
                for r in renders
            ]
        }
        if webhook:
            payload["webhook"] = webhook

        data = await self._client.request("POST", f"{RENDER_PATH}/batch", json=payload)
        return BatchRenderResponse.model_validate(data)

    async def get_batch_status(self, batch_id: str) -> BatchStatus:
        """배치 상태 조회"""
        data = await self._client.request("GET", f"{RENDER_PATH}/batch/{batch_id}/status")
        return BatchStatus.model_validate(data)

    async def wait_for_batch(
        self,
        batch_id: str,
        timeout: float = DEFAULT_BATCH_TIMEOUT,
        poll_interval: float = DEFAULT_BATCH_POLL_INTERVAL,
        cancel_event: asyncio.Event | None = None,
    ) -> list[RenderRecord]:
        """배치의 모든 작업 완료까지 대기 (서버 completed 플래그 기준)

        Raises:
            WaitTimeoutError: 타임아웃 초과
        """
        return await wait_for_batch(
            lambda: self.get_batch_status(batch_id),
            timeout=timeout,
            poll_interval=poll_interval,
            cancel_event=cancel_event,
        )

    async def get_history(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        """렌더링 이력 조회"""
        return await self._client.request(
            "GET", f"{RENDER_PATH}/history", params=page_params(page, limit)
        )

    async def iterate_all(
        self, limit: int = DEFAULT_ITERATE_PAGE_SIZE
    ) -> AsyncIterator[dict[str, Any]]:
        """모든 렌더링 이력 순회 (자동 페이지네이션)"""
        async for record in paginate(self.get_history, limit):
            yield record

    async def list(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> dict[str, Any]:
        """렌더링 이력 조회 (get_history와 동일한 엔드포인트)"""
        return await self.get_history(page, limit)
