"""
Canvelete API 클라이언트 (비동기)

- Bearer API Key 인증
- HTTP 상태 코드 → 에러 분류 매핑
- 선택적 재시도 정책 (RetryPolicy)
- 리소스 객체 (designs, templates, render, ...)
"""

import logging
from typing import Any

import httpx

from .config import DEFAULT_BASE_URL, ClientConfig
from .errors import (
    AuthenticationError,
    CanveleteError,
    RequestTimeoutError,
    error_from_response,
    format_error,
)
from .resources import (
    APIKeysResource,
    AssetsResource,
    BillingResource,
    CanvasResource,
    DesignsResource,
    RenderResource,
    TemplatesResource,
    UsageResource,
)
from .retry import RetryPolicy, execute_with_retry

logger = logging.getLogger(__name__)

SDK_VERSION = "2.0.0"
USER_AGENT = f"canvelete-python/{SDK_VERSION}"


class CanveleteClient:
    """비동기 Canvelete API 클라이언트

    Note: httpx.AsyncClient를 캐싱하지 않고 요청마다 새로 생성한다
    (여러 이벤트 루프에서 같은 인스턴스를 써도 안전).
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_policy: RetryPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            api_key: Canvelete API Key
            base_url: API 서버 URL
            timeout: 요청 타임아웃 (초)
            retry_policy: 지정 시 모든 요청에 재시도 적용
            transport: httpx 트랜스포트 (테스트용 MockTransport 등)
        """
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_policy = retry_policy
        self._transport = transport

        # 리소스
        self.designs = DesignsResource(self)
        self.templates = TemplatesResource(self)
        self.render = RenderResource(self)
        self.api_keys = APIKeysResource(self)
        self.canvas = CanvasResource(self)
        self.assets = AssetsResource(self)
        self.usage = UsageResource(self)
        self.billing = BillingResource(self)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "CanveleteClient":
        """ClientConfig로 클라이언트 생성 (max_retries > 0이면 재시도 활성화)"""
        retry_policy = None
        if config.max_retries > 0:
            retry_policy = RetryPolicy(max_attempts=config.max_retries + 1)

        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            retry_policy=retry_policy,
            transport=transport,
        )

    @classmethod
    def from_env(cls) -> "CanveleteClient":
        """환경변수 설정으로 클라이언트 생성"""
        return cls.from_config(ClientConfig.from_env())

    def _auth_headers(self) -> dict[str, str]:
        """인증 헤더 생성

        Raises:
            AuthenticationError: API Key 미설정
        """
        if not self.api_key:
            raise AuthenticationError("No API key provided")

        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def _create_client(self) -> httpx.AsyncClient:
        """새로운 HTTP 클라이언트 생성 (매 요청마다)"""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._auth_headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        binary: bool = False,
    ) -> Any:
        """인증된 API 요청

        Args:
            method: HTTP 메서드
            path: API 경로 (예: /api/v1/render)
            params: 쿼리 파라미터
            json: JSON 바디
            binary: True면 응답 바이트 반환

        Returns:
            파싱된 JSON, bytes (binary=True) 또는 빈 응답이면 None

        Raises:
            CanveleteError: 분류된 HTTP 에러, 타임아웃, 연결 실패
        """

        async def send() -> Any:
            return await self._send(method, path, params=params, json=json, binary=binary)

        if self.retry_policy is not None:
            return await execute_with_retry(send, self.retry_policy)
        return await send()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None,
        json: dict[str, Any] | None,
        binary: bool,
    ) -> Any:
        """단일 HTTP 요청 (재시도 없음)"""
        try:
            async with self._create_client() as client:
                response = await client.request(method, path, params=params, json=json)
        except httpx.TimeoutException as e:
            logger.error(f"Canvelete {method} {path} timed out after {self.timeout}s")
            raise RequestTimeoutError(f"Request timeout after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.error(f"Canvelete {method} {path} error: {e}")
            raise CanveleteError(f"Request failed: {e}") from e

        error = error_from_response(response)
        if error is not None:
            logger.error(f"Canvelete {method} {path} failed: {format_error(error)}")
            raise error

        if binary:
            return response.content
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Canvelete {method} {path} returned invalid JSON: {e}")
            raise CanveleteError(
                f"Invalid JSON response: {e}", response.status_code, response
            ) from e
