"""
FastAPI 의존성 주입 모듈

웹훅 인증, 이벤트 디스패처, 앱 설정 의존성을 관리합니다.
"""

import os

from fastapi import Depends, Request

from canvelete.types import WebhookEvent

from .events import WebhookDispatcher
from .middleware.webhook_auth import WebhookSignatureAuth, get_webhook_auth


# ============================================================================
# 웹훅 서명 검증 의존성
# ============================================================================
async def verify_webhook(
    request: Request,
    auth: WebhookSignatureAuth = Depends(get_webhook_auth),
) -> WebhookEvent | None:
    """웹훅 서명 검증 의존성

    Returns:
        검증된 WebhookEvent
    """
    return await auth(request)


# ============================================================================
# 이벤트 디스패처 의존성
# ============================================================================
_dispatcher: WebhookDispatcher | None = None


def set_dispatcher(dispatcher: WebhookDispatcher | None) -> None:
    """디스패처 설정 (앱 시작 시 호출)"""
    global _dispatcher
    _dispatcher = dispatcher


def get_dispatcher() -> WebhookDispatcher:
    """디스패처 의존성 (없으면 빈 디스패처 생성)"""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = WebhookDispatcher()
    return _dispatcher


# ============================================================================
# 환경 설정 의존성
# ============================================================================
class Settings:
    """앱 설정 클래스"""

    def __init__(self):
        self.env = os.getenv("ENV", "dev")
        self.debug = self.env == "dev"

        # API 서버 설정
        self.api_host = os.getenv("API_HOST", "0.0.0.0")
        self.api_port = int(os.getenv("API_PORT", "8000"))


_settings: Settings | None = None


def get_settings() -> Settings:
    """앱 설정 의존성 (싱글톤)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
