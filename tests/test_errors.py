"""
에러 분류 시스템 테스트

HTTP 상태 코드 → ErrorKind 매핑과 재시도 판단 테스트.
"""

import httpx
import pytest

from canvelete.errors import (
    RETRYABLE_KINDS,
    AuthenticationError,
    CanveleteError,
    ErrorKind,
    InsufficientScopeError,
    NotFoundError,
    RateLimitError,
    RenderJobFailedError,
    ServerError,
    ValidationError,
    WaitTimeoutError,
    error_from_response,
    format_error,
    is_retryable,
    map_http_error,
    parse_retry_after,
)


class TestMapHttpError:
    """상태 코드 매핑 테스트"""

    def test_success_status_returns_none(self):
        """400 미만은 에러 아님"""
        assert map_http_error(200, {"ok": True}) is None
        assert map_http_error(302) is None

    def test_401_authentication(self):
        error = map_http_error(401, {"error": "Invalid API key"})

        assert isinstance(error, AuthenticationError)
        assert error.kind == ErrorKind.AUTHENTICATION
        assert error.status_code == 401
        assert error.message == "Invalid API key"

    def test_403_with_scope_message(self):
        """403 + 'scope' 포함 메시지 → InsufficientScopeError"""
        error = map_http_error(403, {"error": "Missing required Scope: render:write"})

        assert isinstance(error, InsufficientScopeError)
        assert error.kind == ErrorKind.INSUFFICIENT_SCOPE

    def test_403_insufficient_scope_sentence(self):
        error = map_http_error(403, {"error": "insufficient scope for this action"})

        assert isinstance(error, InsufficientScopeError)
        assert error.message == "insufficient scope for this action"

    def test_403_without_scope_message(self):
        """403 + 일반 메시지 → AuthenticationError"""
        error = map_http_error(403, {"error": "forbidden"})

        assert isinstance(error, AuthenticationError)
        assert error.message == "forbidden"

    def test_404_not_found(self):
        error = map_http_error(404, {"message": "Design not found"})

        assert isinstance(error, NotFoundError)
        assert error.message == "Design not found"

    def test_422_validation(self):
        error = map_http_error(422, {"error": "name is required"})

        assert isinstance(error, ValidationError)
        assert error.kind == ErrorKind.VALIDATION

    def test_429_with_retry_after(self):
        """429 + Retry-After 헤더"""
        error = map_http_error(
            429, {"error": "slow down"}, headers={"Retry-After": "10"}
        )

        assert isinstance(error, RateLimitError)
        assert error.retry_after == 10
        assert error.message == "slow down"

    def test_429_without_retry_after(self):
        error = map_http_error(429, {"error": "slow down"}, headers={})

        assert isinstance(error, RateLimitError)
        assert error.retry_after is None

    def test_429_invalid_retry_after(self):
        """날짜 형식 Retry-After는 무시"""
        error = map_http_error(
            429, None, headers={"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"}
        )

        assert isinstance(error, RateLimitError)
        assert error.retry_after is None

    @pytest.mark.parametrize("status_code", [500, 502, 503, 504])
    def test_5xx_server(self, status_code: int):
        error = map_http_error(status_code, None)

        assert isinstance(error, ServerError)
        assert error.kind == ErrorKind.SERVER

    def test_other_4xx_generic(self):
        """분류되지 않은 4xx → 기본 CanveleteError"""
        error = map_http_error(409, {"error": "conflict"})

        assert type(error) is CanveleteError
        assert error.kind == ErrorKind.GENERIC
        assert error.status_code == 409

    def test_message_fallback(self):
        """error/message 필드가 없으면 HTTP <status>"""
        error = map_http_error(500, {"detail": "boom"})

        assert error.message == "HTTP 500"

    def test_error_field_preferred_over_message(self):
        error = map_http_error(400, {"error": "primary", "message": "secondary"})

        assert error.message == "primary"


class TestParseRetryAfter:
    """Retry-After 파싱 테스트"""

    def test_integer_seconds(self):
        assert parse_retry_after("5") == 5
        assert parse_retry_after(" 30 ") == 30

    def test_zero(self):
        assert parse_retry_after("0") == 0

    def test_invalid_values(self):
        assert parse_retry_after(None) is None
        assert parse_retry_after("") is None
        assert parse_retry_after("-1") is None
        assert parse_retry_after("1.5") is None
        assert parse_retry_after("soon") is None


class TestErrorFromResponse:
    """httpx 응답 → 에러 변환 테스트"""

    def test_unparsable_body(self):
        """JSON이 아닌 바디 → HTTP <status> 메시지"""
        response = httpx.Response(500, content=b"<html>Bad Gateway</html>")
        error = error_from_response(response)

        assert isinstance(error, ServerError)
        assert error.message == "HTTP 500"
        assert error.response is response

    def test_rate_limit_header(self):
        response = httpx.Response(
            429, json={"error": "slow down"}, headers={"Retry-After": "7"}
        )
        error = error_from_response(response)

        assert isinstance(error, RateLimitError)
        assert error.retry_after == 7

    def test_success_response(self):
        assert error_from_response(httpx.Response(200, json={})) is None


class TestIsRetryable:
    """재시도 판단 테스트"""

    def test_default_kinds(self):
        assert is_retryable(ServerError("x"), RETRYABLE_KINDS)
        assert is_retryable(RateLimitError("x"), RETRYABLE_KINDS)
        assert not is_retryable(AuthenticationError("x"), RETRYABLE_KINDS)
        assert not is_retryable(NotFoundError("x"), RETRYABLE_KINDS)

    def test_unclassified_error_not_retryable(self):
        """CanveleteError가 아닌 예외는 재시도 안 함"""
        assert not is_retryable(ConnectionError("x"), RETRYABLE_KINDS)

    def test_empty_kinds(self):
        assert not is_retryable(ServerError("x"), frozenset())


class TestSpecialErrors:
    """대기 관련 에러 테스트"""

    def test_render_job_failed(self):
        error = RenderJobFailedError("Font not found")

        assert error.reason == "Font not found"
        assert "Font not found" in str(error)

    def test_wait_timeout_is_builtin_timeout(self):
        """WaitTimeoutError는 TimeoutError로도 잡힌다"""
        error = WaitTimeoutError("timeout", 30.0)

        assert isinstance(error, TimeoutError)
        assert isinstance(error, CanveleteError)
        assert error.timeout == 30.0


class TestFormatError:
    """에러 포맷팅 테스트"""

    def test_format_classified_error(self):
        error = map_http_error(404, {"error": "Design not found"})

        assert format_error(error) == "[not_found] HTTP 404 NotFoundError: Design not found"

    def test_format_without_status(self):
        error = ValidationError("bad input")

        assert format_error(error) == "[validation] ValidationError: bad input"

    def test_format_unclassified(self):
        error = ValueError("oops")

        assert format_error(error) == "[unclassified] ValueError: oops"
