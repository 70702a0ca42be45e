"""
헬스체크 API 라우터
"""

import time

from fastapi import APIRouter, Depends

from canvelete.client import SDK_VERSION

from ..middleware.webhook_auth import WebhookSignatureAuth, get_webhook_auth
from ..schemas.response import HealthResponse

router = APIRouter(tags=["Health"])

# 서버 시작 시각
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="헬스체크",
    description="서버 상태 및 웹훅 설정 여부를 반환합니다.",
)
async def health_check(
    auth: WebhookSignatureAuth = Depends(get_webhook_auth),
) -> HealthResponse:
    """서버 헬스체크"""
    return HealthResponse(
        status="ok",
        version=SDK_VERSION,
        uptime_seconds=int(time.time() - _start_time),
        webhook_configured=auth.configured,
    )


@router.get(
    "/health/live",
    summary="Liveness 체크",
    description="서버가 살아있는지 확인합니다. (Kubernetes liveness probe용)",
)
async def liveness() -> dict[str, str]:
    """Liveness 체크 (경량)"""
    return {"status": "ok"}
