"""
API 응답 스키마 정의
"""

from typing import Any

from pydantic import BaseModel, Field


class WebhookAckResponse(BaseModel):
    """웹훅 수신 확인 응답"""

    received: bool = Field(default=True, description="수신 여부")
    id: str = Field(..., description="이벤트 ID")
    type: str = Field(..., description="이벤트 타입")
    handled: int = Field(default=0, description="처리에 성공한 핸들러 수")

    model_config = {
        "json_schema_extra": {
            "example": {
                "received": True,
                "id": "evt_123",
                "type": "render.completed",
                "handled": 1,
            }
        }
    }


class ErrorResponse(BaseModel):
    """API 에러 응답"""

    error: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    details: dict[str, Any] | None = Field(
        default=None,
        description="상세 에러 정보",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "INVALID_SIGNATURE",
                "message": "Invalid webhook signature",
                "details": None,
            }
        }
    }


class HealthResponse(BaseModel):
    """헬스체크 응답"""

    status: str = Field(default="ok", description="서버 상태")
    version: str = Field(..., description="SDK 버전")
    uptime_seconds: int = Field(default=0, description="서버 가동 시간 (초)")
    webhook_configured: bool = Field(default=False, description="웹훅 시크릿 설정 여부")
