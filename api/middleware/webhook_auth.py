"""
웹훅 서명 인증

Canvelete-Signature 헤더와 원본 바디로 HMAC 서명을 검증하고
검증된 WebhookEvent를 라우트에 주입합니다.
"""

import logging

from fastapi import HTTPException, Request, status

from canvelete.config import ClientConfig
from canvelete.errors import CanveleteError, WebhookSignatureError
from canvelete.types import WebhookEvent
from canvelete.webhooks import SIGNATURE_HEADER, construct_webhook_event

logger = logging.getLogger(__name__)


class WebhookRejectedError(HTTPException):
    """웹훅 거부

    앱에 등록된 핸들러가 ErrorResponse 형태(error, message, details)로 응답한다.
    """

    def __init__(self, status_code: int, error: str, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.error = error
        self.message = message


class WebhookSignatureAuth:
    """웹훅 서명 인증 의존성

    사용법:
        ```python
        auth = WebhookSignatureAuth(secret="whsec_...")

        @app.post("/webhooks/canvelete")
        async def receive(event: WebhookEvent = Depends(auth)):
            return {"received": True}
        ```
    """

    HEADER_NAME = SIGNATURE_HEADER

    def __init__(
        self,
        secret: str | None = None,
        tolerance: int | None = None,
        auto_error: bool = True,
    ):
        """
        Args:
            secret: 웹훅 시크릿 (None이면 CANVELETE_WEBHOOK_SECRET)
            tolerance: 허용 시각 차이 (초, None이면 CANVELETE_WEBHOOK_TOLERANCE)
            auto_error: 검증 실패 시 HTTP 400 발생 여부 (False면 None 반환)
        """
        config = ClientConfig.from_env()
        self._secret = secret if secret is not None else config.webhook_secret
        self._tolerance = (
            tolerance if tolerance is not None else config.webhook_tolerance
        )
        self._auto_error = auto_error

    def _reject(self, error: str, message: str) -> None:
        if self._auto_error:
            raise WebhookRejectedError(status.HTTP_400_BAD_REQUEST, error, message)

    async def __call__(self, request: Request) -> WebhookEvent | None:
        """서명 검증 후 이벤트 반환

        Raises:
            WebhookRejectedError: 검증 실패 시 (auto_error=True인 경우)
        """
        if not self._secret:
            logger.error("[Webhook] CANVELETE_WEBHOOK_SECRET 미설정 - 모든 웹훅 거부")
            raise WebhookRejectedError(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "WEBHOOK_NOT_CONFIGURED",
                "Webhook secret is not configured",
            )

        signature = request.headers.get(self.HEADER_NAME)
        if not signature:
            self._reject("MISSING_SIGNATURE", f"Missing {self.HEADER_NAME} header")
            return None

        payload = await request.body()

        try:
            return construct_webhook_event(
                payload, signature, self._secret, self._tolerance
            )
        except WebhookSignatureError:
            logger.warning("[Webhook] 서명 검증 실패")
            self._reject("INVALID_SIGNATURE", "Invalid webhook signature")
        except CanveleteError as e:
            logger.warning(f"[Webhook] 페이로드 파싱 실패: {e}")
            self._reject("INVALID_PAYLOAD", "Webhook payload is not a valid event")
        return None

    @property
    def tolerance(self) -> int:
        return self._tolerance

    @property
    def configured(self) -> bool:
        """웹훅 시크릿 설정 여부"""
        return bool(self._secret)


# 싱글톤 인스턴스
_auth_instance: WebhookSignatureAuth | None = None


def get_webhook_auth() -> WebhookSignatureAuth:
    """웹훅 인증 인스턴스 반환 (싱글톤)"""
    global _auth_instance
    if _auth_instance is None:
        _auth_instance = WebhookSignatureAuth()
    return _auth_instance


def set_webhook_auth(auth: WebhookSignatureAuth | None) -> None:
    """웹훅 인증 인스턴스 교체 (앱 시작/테스트 시)"""
    global _auth_instance
    _auth_instance = auth
