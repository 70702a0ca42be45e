"""
API 응답 스키마 모듈
"""

from .response import ErrorResponse, HealthResponse, WebhookAckResponse

__all__ = ["ErrorResponse", "HealthResponse", "WebhookAckResponse"]
