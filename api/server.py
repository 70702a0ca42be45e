"""
FastAPI 앱 정의 및 라우터 통합

Canvelete 웹훅 수신 서버의 메인 모듈입니다.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from canvelete.client import SDK_VERSION

from .dependencies import get_settings, set_dispatcher
from .events import WebhookDispatcher
from .middleware.webhook_auth import (
    WebhookRejectedError,
    WebhookSignatureAuth,
    get_webhook_auth,
    set_webhook_auth,
)
from .routes import health_router, webhooks_router
from .schemas.response import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """앱 라이프사이클 관리"""
    auth = get_webhook_auth()
    if auth.configured:
        logger.info(f"[Server] 웹훅 수신 준비 완료 (tolerance={auth.tolerance}s)")
    else:
        logger.warning("[Server] CANVELETE_WEBHOOK_SECRET 미설정 - 웹훅이 거부됩니다")

    yield

    logger.info("[Server] 서버 종료")


def create_app(
    dispatcher: WebhookDispatcher | None = None,
    webhook_secret: str | None = None,
    tolerance: int | None = None,
    debug: bool = False,
) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        dispatcher: 이벤트 핸들러가 등록된 디스패처
        webhook_secret: 웹훅 시크릿 (None이면 환경변수)
        tolerance: 허용 시각 차이 (초, None이면 환경변수)
        debug: 디버그 모드 (Starlette 디버그 트레이스백 응답)

    Returns:
        FastAPI 앱 인스턴스
    """
    settings = get_settings()

    if dispatcher is not None:
        set_dispatcher(dispatcher)
    if webhook_secret is not None or tolerance is not None:
        set_webhook_auth(WebhookSignatureAuth(secret=webhook_secret, tolerance=tolerance))

    app = FastAPI(
        title="Canvelete Webhook Receiver",
        version=SDK_VERSION,
        description="""
# Canvelete 웹훅 수신 서버

- **웹훅 수신**: POST /webhooks/canvelete
- **헬스체크**: GET /health

## 인증

모든 웹훅 요청은 `Canvelete-Signature: t=<unix>,v1=<hex>` 헤더로 서명됩니다.
        """,
        debug=debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    # 라우터 등록
    app.include_router(health_router)  # /health
    app.include_router(webhooks_router)  # /webhooks/canvelete

    show_details = debug or settings.debug

    @app.exception_handler(WebhookRejectedError)
    async def webhook_rejected_handler(
        request: Request, exc: WebhookRejectedError
    ) -> JSONResponse:
        """웹훅 거부 → ErrorResponse"""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.error, message=exc.message).model_dump(),
        )

    # 글로벌 예외 핸들러
    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """글로벌 예외 핸들러"""
        logger.exception(f"[Server] 처리되지 않은 예외: {exc}")
        details = (
            {"exception": type(exc).__name__, "reason": str(exc)}
            if show_details
            else None
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="INTERNAL_ERROR",
                message="Internal server error",
                details=details,
            ).model_dump(),
        )

    return app


# 기본 앱 인스턴스
app = create_app()


# 직접 실행 시
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
