"""
Canvelete 웹훅 수신 API 모듈

FastAPI 기반으로 Canvelete 웹훅을 검증하고 애플리케이션 핸들러에 전달합니다.
"""

from .events import WebhookDispatcher
from .server import app, create_app

__all__ = ["WebhookDispatcher", "app", "create_app"]
