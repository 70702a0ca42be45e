"""
웹훅 서명 검증

서명 헤더 형식: ``t=<unix 초>,v1=<소문자 hex HMAC-SHA256>``
서명 대상: ``"<t>.<payload>"``
"""

import hashlib
import hmac
import logging
import time

from pydantic import ValidationError as PydanticValidationError

from .errors import CanveleteError, WebhookSignatureError
from .types import WebhookEvent

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 300  # 초

SIGNATURE_HEADER = "Canvelete-Signature"


def _to_bytes(payload: str | bytes) -> bytes:
    return payload.encode("utf-8") if isinstance(payload, str) else payload


def _compute_digest(timestamp: str, payload: bytes, secret: str) -> str:
    signed_payload = timestamp.encode("ascii") + b"." + payload
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def parse_signature_header(signature: str) -> dict[str, str]:
    """서명 헤더를 key=value 매핑으로 파싱 (순서 무관)"""
    parts: dict[str, str] = {}
    for part in signature.split(","):
        key, sep, value = part.strip().partition("=")
        if sep and key and value:
            parts[key] = value
    return parts


def verify_webhook_signature(
    payload: str | bytes,
    signature: str,
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE,
    *,
    now: int | None = None,
) -> bool:
    """웹훅 서명 검증

    예외를 던지지 않고 검증 결과만 반환한다 (형식 오류도 False).

    Args:
        payload: 수신한 원본 바디
        signature: 서명 헤더 값
        secret: 웹훅 시크릿
        tolerance: 허용 시각 차이 (초)
        now: 현재 unix 시각 (테스트용)

    Returns:
        bool: 서명 유효 여부
    """
    parts = parse_signature_header(signature)
    timestamp = parts.get("t")
    v1_signature = parts.get("v1")

    if not timestamp or not v1_signature:
        return False
    if not (timestamp.isascii() and timestamp.isdigit()):
        return False

    current = int(time.time()) if now is None else now
    if abs(current - int(timestamp)) > tolerance:
        logger.debug(f"Webhook timestamp {timestamp} outside tolerance {tolerance}s")
        return False

    expected = _compute_digest(timestamp, _to_bytes(payload), secret)

    # 길이가 달라도 compare_digest로만 비교
    return hmac.compare_digest(v1_signature.encode("utf-8"), expected.encode("ascii"))


def parse_webhook_payload(payload: str | bytes) -> WebhookEvent:
    """검증 없이 웹훅 페이로드 파싱

    Raises:
        CanveleteError: JSON/스키마 오류
    """
    try:
        return WebhookEvent.model_validate_json(payload)
    except PydanticValidationError as e:
        raise CanveleteError(f"웹훅 페이로드 파싱 실패: {e}") from e


def construct_webhook_event(
    payload: str | bytes,
    signature: str,
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE,
) -> WebhookEvent:
    """서명 검증 후 웹훅 이벤트 생성

    Raises:
        WebhookSignatureError: 서명 검증 실패
        CanveleteError: 페이로드 파싱 실패
    """
    if not verify_webhook_signature(payload, signature, secret, tolerance):
        logger.warning("Rejected webhook with invalid signature")
        raise WebhookSignatureError("Invalid webhook signature")

    return parse_webhook_payload(payload)


def generate_webhook_signature(
    payload: str | bytes,
    secret: str,
    *,
    timestamp: int | None = None,
) -> str:
    """웹훅 서명 헤더 생성 (테스트/운영 도구용)"""
    ts = str(int(time.time()) if timestamp is None else timestamp)
    digest = _compute_digest(ts, _to_bytes(payload), secret)
    return f"t={ts},v1={digest}"
