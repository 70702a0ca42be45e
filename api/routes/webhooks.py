"""
웹훅 수신 API 라우터

Canvelete가 보내는 웹훅을 검증하고 등록된 핸들러로 전달합니다.
"""

import logging

from fastapi import APIRouter, Depends, status

from canvelete.types import WebhookEvent

from ..dependencies import get_dispatcher, verify_webhook
from ..events import WebhookDispatcher
from ..middleware.webhook_auth import WebhookRejectedError
from ..schemas.response import ErrorResponse, WebhookAckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Webhooks"])


@router.post(
    "/webhooks/canvelete",
    response_model=WebhookAckResponse,
    summary="Canvelete 웹훅 수신",
    description="Canvelete-Signature 헤더를 검증한 뒤 이벤트를 처리합니다.",
    responses={
        400: {"model": ErrorResponse, "description": "서명/페이로드 검증 실패"},
        500: {"model": ErrorResponse, "description": "웹훅 시크릿 미설정"},
    },
)
async def receive_webhook(
    event: WebhookEvent | None = Depends(verify_webhook),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookAckResponse:
    """웹훅 수신

    Returns:
        WebhookAckResponse: 수신 확인
    """
    if event is None:
        raise WebhookRejectedError(
            status.HTTP_400_BAD_REQUEST, "INVALID_WEBHOOK", "Webhook rejected"
        )

    logger.info(f"[Webhook] 수신: {event.type} ({event.id})")
    handled = await dispatcher.dispatch(event)

    return WebhookAckResponse(id=event.id, type=event.type, handled=handled)
