"""
에러 분류 시스템

HTTP 응답을 닫힌 에러 분류(ErrorKind)로 매핑하고, 재시도 엔진이
kind 태그만으로 재시도 여부를 판단할 수 있게 한다.
"""

from enum import Enum
from typing import Any, Mapping

import httpx


class ErrorKind(str, Enum):
    """에러 종류 (닫힌 분류)"""

    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"  # 재시도 가능
    SERVER = "server"  # 재시도 가능
    INSUFFICIENT_SCOPE = "insufficient_scope"


# 기본 재시도 대상
RETRYABLE_KINDS = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.SERVER})


class CanveleteError(Exception):
    """Canvelete 기본 에러"""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class AuthenticationError(CanveleteError):
    """401, 또는 scope와 무관한 403"""

    kind = ErrorKind.AUTHENTICATION


class ValidationError(CanveleteError):
    """422 또는 클라이언트 측 검증 실패"""

    kind = ErrorKind.VALIDATION


class NotFoundError(CanveleteError):
    kind = ErrorKind.NOT_FOUND


class RateLimitError(CanveleteError):
    """429. retry_after는 서버가 제시한 대기 시간 (초)"""

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message, status_code, response)
        self.retry_after = retry_after


class ServerError(CanveleteError):
    kind = ErrorKind.SERVER


class InsufficientScopeError(CanveleteError):
    """API Key의 scope 부족 (403)"""

    kind = ErrorKind.INSUFFICIENT_SCOPE


class RequestTimeoutError(CanveleteError):
    """응답을 받기 전에 요청 시간 초과"""


class OperationCancelledError(CanveleteError):
    """호출자가 cancel_event로 재시도/대기 루프를 중단"""


class RenderJobFailedError(CanveleteError):
    """렌더링 작업이 failed 상태로 종료"""

    def __init__(self, reason: str, record: Any = None):
        super().__init__(f"렌더링 실패: {reason}")
        self.reason = reason
        self.record = record


class WaitTimeoutError(CanveleteError, TimeoutError):
    """완료 대기 시간 초과 (작업 실패와 구분)"""

    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class WebhookSignatureError(CanveleteError):
    """웹훅 서명 검증 실패"""


def _extract_message(status_code: int, body: Any) -> str:
    """에러 바디에서 메시지 추출 (실패 시 "HTTP <status>")"""
    if isinstance(body, Mapping):
        message = body.get("error") or body.get("message")
        if isinstance(message, str) and message:
            return message
    return f"HTTP {status_code}"


def parse_retry_after(value: str | None) -> int | None:
    """Retry-After 헤더를 정수 초로 파싱

    Returns:
        int | None: 초 단위 값, 없거나 파싱 불가면 None
    """
    if value is None:
        return None
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def map_http_error(
    status_code: int,
    body: Any = None,
    headers: Mapping[str, str] | None = None,
    response: httpx.Response | None = None,
) -> CanveleteError | None:
    """HTTP 상태 코드와 에러 바디를 에러 객체로 변환

    Args:
        status_code: HTTP 상태 코드
        body: 파싱된 에러 바디 ({"error"?, "message"?}), 파싱 실패 시 None
        headers: 응답 헤더 (Retry-After 조회용)
        response: 원본 응답 (에러에 첨부)

    Returns:
        CanveleteError | None: 400 미만이면 None
    """
    if status_code < 400:
        return None

    message = _extract_message(status_code, body)

    if status_code == 401:
        return AuthenticationError(message, status_code, response)
    if status_code == 403:
        if "scope" in message.lower():
            return InsufficientScopeError(message, status_code, response)
        return AuthenticationError(message, status_code, response)
    if status_code == 404:
        return NotFoundError(message, status_code, response)
    if status_code == 422:
        return ValidationError(message, status_code, response)
    if status_code == 429:
        retry_after = None
        if headers is not None:
            retry_after = parse_retry_after(headers.get("Retry-After"))
        return RateLimitError(message, retry_after, status_code, response)
    if status_code >= 500:
        return ServerError(message, status_code, response)

    return CanveleteError(message, status_code, response)


def error_from_response(response: httpx.Response) -> CanveleteError | None:
    """httpx 응답에서 에러 생성 (바디는 best-effort로 파싱)"""
    if response.status_code < 400:
        return None

    try:
        body = response.json()
    except ValueError:
        body = None

    return map_http_error(
        response.status_code,
        body,
        headers=response.headers,
        response=response,
    )


def is_retryable(error: BaseException, kinds: frozenset[ErrorKind]) -> bool:
    """에러 kind가 재시도 대상 집합에 포함되는지 확인"""
    return isinstance(error, CanveleteError) and error.kind in kinds


def format_error(error: BaseException) -> str:
    """로그용 에러 메시지 포맷팅

    Args:
        error: 포맷팅할 예외 객체

    Returns:
        str: kind 라벨과 상태 코드가 포함된 메시지
    """
    if not isinstance(error, CanveleteError):
        return f"[unclassified] {type(error).__name__}: {error}"

    label = f"[{error.kind.value}]"
    if error.status_code is not None:
        label += f" HTTP {error.status_code}"
    return f"{label} {type(error).__name__}: {error.message}"
