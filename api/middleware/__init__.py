"""
API 미들웨어 모듈
"""

from .webhook_auth import WebhookSignatureAuth, get_webhook_auth

__all__ = ["WebhookSignatureAuth", "get_webhook_auth"]
